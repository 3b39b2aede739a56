"""Projections of ``User`` used in API payloads. None of them include the password hash."""

PROFILE_FIELDS = ("location", "bio", "company", "position")


def user_to_dict(user, *, include_job_refs=False):
    data = {
        "id": user.pk,
        "name": user.name,
        "email": user.email,
        "role": user.role,
    }
    for field in PROFILE_FIELDS:
        data[field] = getattr(user, field)
    if include_job_refs:
        data["savedJobs"] = user.saved_job_ids()
        data["appliedJobs"] = user.applied_job_ids()
    return data


def owner_projection(user):
    """Public view of a job's owner."""
    return {"id": user.pk, "name": user.name, "company": user.company}


def applicant_projection(user):
    """What a job owner may see about an applicant."""
    data = {"id": user.pk, "name": user.name, "email": user.email}
    for field in PROFILE_FIELDS:
        data[field] = getattr(user, field)
    return data
