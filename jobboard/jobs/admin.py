from django.contrib import admin
from .models import Job, JobApplication, Tag


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = ("title", "owner", "location", "job_type", "status", "created_at")
    list_filter = ("status", "job_type")
    search_fields = ("title", "location", "owner__email")
    filter_horizontal = ("tags",)
    raw_id_fields = ("owner", "likes")


@admin.register(JobApplication)
class JobApplicationAdmin(admin.ModelAdmin):
    list_display = ("job", "applicant", "status", "applied_at")
    list_filter = ("status",)
    raw_id_fields = ("job", "applicant")


admin.site.register(Tag)
