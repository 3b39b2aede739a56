"""Capability checks over (identity, resource).

Views and services ask these functions instead of comparing role strings or
owner ids themselves.
"""

from __future__ import annotations

from .models import User

Role = User.Role

JOB_POSTING_ROLES = frozenset({Role.RECRUITER})


def can_post_jobs(identity) -> bool:
    return identity is not None and identity.role in JOB_POSTING_ROLES


def can_manage_job(identity, job) -> bool:
    """Only the recruiter who created a job may change, delete or triage it."""
    return identity is not None and job.owner_id == identity.user_id


def can_view_applicants(identity, job) -> bool:
    return can_manage_job(identity, job)
