"""Job and application lifecycle.

Every operation validates input and checks ownership before it touches the
database. Views translate HTTP to these calls; the management command and the
tests use them directly.
"""

import logging

from django.db import IntegrityError, transaction

from accounts.permissions import can_manage_job, can_post_jobs, can_view_applicants
from jobboard_api.errors import AuthorizationFailure, Conflict, NotFound, ValidationFailure
from resumes.storage import discard_resume, discard_resumes, save_resume
from resumes.validators import validate_resume

from .forms import FORM_TO_WIRE, JobForm, job_data_from_instance, job_data_from_payload
from .models import ApplicationStatus, Job, JobApplication, JobStatus
from .utils import logged_operation

logger = logging.getLogger(__name__)


def _get_job(job_id, queryset=None):
    qs = queryset if queryset is not None else Job.objects.with_relations()
    try:
        return qs.get(pk=int(job_id))
    except (Job.DoesNotExist, TypeError, ValueError):
        raise NotFound(f"Job with id {job_id} not found")


def _get_owned_job(identity, job_id, *, action):
    job = _get_job(job_id)
    if not can_manage_job(identity, job):
        raise AuthorizationFailure(f"You can only {action} jobs that you created")
    return job


def _reload(job):
    return _get_job(job.pk)


# -----------------------------
# Jobs
# -----------------------------
@logged_operation("create_job")
def create_job(identity, fields):
    if not can_post_jobs(identity):
        raise AuthorizationFailure("Only recruiters can post jobs")
    owner = identity.get_user()
    if not owner.is_recruiter:
        raise AuthorizationFailure("Only recruiters can post jobs")

    form = JobForm(job_data_from_payload(fields))
    if not form.is_valid():
        raise ValidationFailure.from_form(form, FORM_TO_WIRE)

    with transaction.atomic():
        job = form.save(commit=False)
        job.owner = owner
        job.status = JobStatus.OPEN
        job.save()
        job.set_tags(form.cleaned_data["tags"])

    logger.info("Job created: job_id=%s owner_id=%s", job.pk, owner.pk)
    return _reload(job)


@logged_operation("list_jobs")
def list_jobs(status=JobStatus.OPEN, job_type=None):
    qs = Job.objects.with_relations()
    if status:
        qs = qs.filter(status=status)
    if job_type:
        qs = qs.filter(job_type=job_type)
    return list(qs.recent())


@logged_operation("search_jobs")
def search_jobs(tags=None, location=None, title=None):
    qs = Job.objects.with_relations().open().search(tags=tags, location=location, title=title)
    return list(qs.recent())


@logged_operation("get_job")
def get_job(job_id):
    return _get_job(job_id)


@logged_operation("update_job")
def update_job(identity, job_id, fields):
    job = _get_owned_job(identity, job_id, action="update")

    data = job_data_from_instance(job)
    data.update(job_data_from_payload(fields))
    form = JobForm(data, instance=job)
    if not form.is_valid():
        raise ValidationFailure.from_form(form, FORM_TO_WIRE)

    with transaction.atomic():
        job = form.save()

    logger.info("Job updated: job_id=%s owner_id=%s", job.pk, identity.user_id)
    return _reload(job)


@logged_operation("delete_job")
def delete_job(identity, job_id):
    job = _get_owned_job(identity, job_id, action="delete")
    resume_names = [application.resume.name for application in job.applications.all()]

    with transaction.atomic():
        job.delete()
        transaction.on_commit(lambda: discard_resumes(resume_names))

    logger.info(
        "Job deleted: job_id=%s owner_id=%s applications=%s",
        job_id,
        identity.user_id,
        len(resume_names),
    )


@logged_operation("list_jobs_by_owner")
def list_jobs_by_owner(identity):
    return list(Job.objects.with_relations().for_owner(identity.user_id).recent())


@logged_operation("like_job")
def like_job(identity, job_id):
    """Toggle the caller in the job's likes. Returns ``(job, liked)``."""
    job = _get_job(job_id, Job.objects.all())
    user = identity.get_user()

    if job.likes.filter(pk=user.pk).exists():
        job.likes.remove(user)
        liked = False
    else:
        job.likes.add(user)
        liked = True

    logger.info("Job %s: job_id=%s user_id=%s", "liked" if liked else "unliked", job.pk, user.pk)
    return _reload(job), liked


# -----------------------------
# Applications
# -----------------------------
def _already_applied(job, user_id):
    return JobApplication.objects.filter(job=job, applicant_id=user_id).exists()


def _text_field(value, label, field):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationFailure(f"{label} must be text", field=field)
    return value.strip()


@logged_operation("apply_to_job")
def apply_to_job(identity, job_id, resume, phone_number, cover_letter=None):
    job = _get_job(job_id, Job.objects.all())
    applicant = identity.get_user()

    if not job.is_open:
        raise Conflict("This job is no longer accepting applications")
    if _already_applied(job, applicant.pk):
        raise Conflict("You have already applied to this job")

    phone_number = _text_field(phone_number, "Phone number", "phoneNumber")
    if not phone_number:
        raise ValidationFailure("Phone number is required", field="phoneNumber")
    cover_letter = _text_field(cover_letter, "Cover letter", "coverLetter")
    validate_resume(resume)

    # The file is written before the row; if the row cannot be written the
    # file is removed again, so neither exists without the other.
    resume_name = save_resume(applicant.pk, resume)
    try:
        with transaction.atomic():
            job = Job.objects.select_for_update().get(pk=job.pk)
            if not job.is_open:
                raise Conflict("This job is no longer accepting applications")
            if _already_applied(job, applicant.pk):
                raise Conflict("You have already applied to this job")
            application = JobApplication.objects.create(
                job=job,
                applicant=applicant,
                resume=resume_name,
                phone_number=phone_number,
                cover_letter=cover_letter,
                status=ApplicationStatus.PENDING,
            )
    except IntegrityError:
        # a concurrent apply for the same pair won the unique constraint
        discard_resume(resume_name)
        raise Conflict("You have already applied to this job")
    except Exception:
        discard_resume(resume_name)
        raise

    logger.info(
        "Application submitted: application_id=%s job_id=%s applicant_id=%s",
        application.pk,
        job.pk,
        applicant.pk,
    )
    return application


@logged_operation("list_applicants")
def list_applicants(identity, job_id):
    """Return ``(job, applications)`` for the job owner."""
    job = _get_job(job_id, Job.objects.all())
    if not can_view_applicants(identity, job):
        raise AuthorizationFailure("You can only view applicants for jobs that you created")
    applications = list(JobApplication.objects.for_job(job).select_related("applicant"))
    return job, applications


@logged_operation("update_application_status")
def update_application_status(identity, job_id, application_id, status):
    """Move an application to ``status``.

    Any status may follow any other; the pipeline is not enforced as a graph.
    """
    if not application_id or not status:
        raise ValidationFailure(
            "Please provide applicationId and status",
            field="status" if application_id else "applicationId",
        )
    if status not in ApplicationStatus.values:
        raise ValidationFailure(
            f"Status must be one of: {', '.join(ApplicationStatus.values)}",
            field="status",
        )

    job = _get_job(job_id, Job.objects.all())
    if not can_manage_job(identity, job):
        raise AuthorizationFailure("You can only update applications for jobs that you created")

    try:
        application = JobApplication.objects.for_job(job).select_related("applicant").get(pk=int(application_id))
    except (JobApplication.DoesNotExist, TypeError, ValueError):
        raise NotFound(f"Application with id {application_id} not found")

    previous = application.status
    application.status = status
    application.save(update_fields=["status"])
    logger.info(
        "Application status changed: application_id=%s job_id=%s %s -> %s",
        application.pk,
        job.pk,
        previous,
        status,
    )
    return application

