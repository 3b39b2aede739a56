from accounts.serializers import applicant_projection, owner_projection


def job_to_dict(job):
    """Public payload of a job.

    ``applicants`` is the legacy flat list of applicant ids, derived from the
    applications; contact details are only available to the owner through the
    applicants endpoint.
    """
    return {
        "id": job.pk,
        "title": job.title,
        "description": job.description,
        "location": job.location,
        "salary": job.salary,
        "salaryType": job.salary_type,
        "negotiable": job.negotiable,
        "jobType": job.job_type,
        "tags": job.tag_names(),
        "skills": job.skills_list(),
        "status": job.status,
        "postedBy": owner_projection(job.owner),
        "likes": job.like_ids(),
        "applicants": job.applicant_ids(),
        "createdAt": job.created_at.isoformat(),
        "updatedAt": job.updated_at.isoformat(),
    }


def application_to_dict(application, *, with_applicant=False):
    data = {
        "id": application.pk,
        "jobId": application.job_id,
        "applicantId": application.applicant_id,
        "resumeUrl": application.resume.url if application.resume else "",
        "phoneNumber": application.phone_number,
        "coverLetter": application.cover_letter,
        "appliedAt": application.applied_at.isoformat(),
        "status": application.status,
    }
    if with_applicant:
        data["applicant"] = applicant_projection(application.applicant)
    return data
