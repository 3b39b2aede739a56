from django.urls import path
from . import views

urlpatterns = [
    path("jobs", views.jobs_collection, name="jobs"),
    path("jobs/search", views.search_jobs, name="search_jobs"),
    path("jobs/user/myjobs", views.my_jobs, name="my_jobs"),
    path("jobs/<int:job_id>", views.job_detail, name="job_detail"),
    path("jobs/<int:job_id>/apply", views.apply_job, name="apply_job"),
    path("jobs/<int:job_id>/like", views.like_job, name="like_job"),
    path("jobs/<int:job_id>/applicants", views.job_applicants, name="job_applicants"),
]
