import logging

from accounts.decorators import role_required, token_required
from accounts.models import User
from jobboard_api.http import api_view, ok, parse_form_data, parse_json

from . import services
from .models import JobType
from .serializers import application_to_dict, job_to_dict

logger = logging.getLogger(__name__)


def _jobs_payload(jobs):
    return {"count": len(jobs), "jobs": [job_to_dict(job) for job in jobs]}


# -----------------------------
# Public: Job browsing + search
# -----------------------------
@api_view("GET", "POST")
def jobs_collection(request):
    if request.method == "POST":
        return create_job(request)

    job_type = (request.GET.get("jobType") or "").strip()
    if job_type not in JobType.values:
        job_type = None
    return ok(_jobs_payload(services.list_jobs(job_type=job_type)))


@api_view("GET")
def search_jobs(request):
    jobs = services.search_jobs(
        tags=request.GET.get("tags"),
        location=request.GET.get("location"),
        title=request.GET.get("title"),
    )
    return ok(_jobs_payload(jobs))


@api_view("GET", "PUT", "PATCH", "DELETE")
def job_detail(request, job_id):
    if request.method in ("PUT", "PATCH"):
        return update_job(request, job_id)
    if request.method == "DELETE":
        return delete_job(request, job_id)
    return ok({"job": job_to_dict(services.get_job(job_id))})


# -----------------------------
# Recruiter: Create/Edit/Delete Jobs
# -----------------------------
@role_required(User.Role.RECRUITER)
def create_job(request):
    job = services.create_job(request.identity, parse_json(request))
    return ok({"job": job_to_dict(job)}, status=201)


@token_required
def update_job(request, job_id):
    job = services.update_job(request.identity, job_id, parse_json(request))
    return ok({"job": job_to_dict(job)})


@token_required
def delete_job(request, job_id):
    services.delete_job(request.identity, job_id)
    return ok({"message": "Job deleted successfully"})


@api_view("GET")
@token_required
def my_jobs(request):
    return ok(_jobs_payload(services.list_jobs_by_owner(request.identity)))


# -----------------------------
# Job Seeker: Apply + like
# -----------------------------
@api_view("PUT", "POST")
@token_required
def apply_job(request, job_id):
    data, files = parse_form_data(request)
    application = services.apply_to_job(
        request.identity,
        job_id,
        resume=files.get("resume"),
        phone_number=data.get("phoneNumber"),
        cover_letter=data.get("coverLetter"),
    )
    return ok({"message": "Application submitted successfully", "application": application_to_dict(application)})


@api_view("PUT")
@token_required
def like_job(request, job_id):
    job, liked = services.like_job(request.identity, job_id)
    return ok({
        "message": "Job liked successfully" if liked else "Job unliked successfully",
        "liked": liked,
        "job": job_to_dict(job),
    })


# -----------------------------
# Recruiter: applicant tracking
# -----------------------------
@api_view("GET", "PUT")
@token_required
def job_applicants(request, job_id):
    if request.method == "PUT":
        payload = parse_json(request)
        application = services.update_application_status(
            request.identity,
            job_id,
            payload.get("applicationId"),
            payload.get("status"),
        )
        return ok({
            "message": f"Application status updated to {application.status}",
            "application": application_to_dict(application, with_applicant=True),
        })

    job, applications = services.list_applicants(request.identity, job_id)
    return ok({
        "jobId": job.pk,
        "jobTitle": job.title,
        "count": len(applications),
        "applications": [application_to_dict(a, with_applicant=True) for a in applications],
    })
