"""Where uploaded resumes live on disk.

Stored names are built from the applicant id, the upload time in milliseconds
and the validated extension. The client's filename is never used.
"""

import logging

from django.core.files.storage import default_storage
from django.utils import timezone

from .validators import resume_extension

logger = logging.getLogger(__name__)

RESUME_DIR = "resumes"


def resume_storage_name(applicant_id, original_name, *, now=None) -> str:
    stamp = int((now or timezone.now()).timestamp() * 1000)
    return f"{RESUME_DIR}/{applicant_id}_{stamp}{resume_extension(original_name)}"


def save_resume(applicant_id, upload) -> str:
    """Write the upload to storage and return the name it was stored under."""
    name = resume_storage_name(applicant_id, upload.name)
    # the storage appends a random suffix if the name is already taken
    stored = default_storage.save(name, upload)
    logger.info("Resume stored: applicant_id=%s name=%s size=%s", applicant_id, stored, upload.size)
    return stored


def discard_resume(name) -> None:
    if not name:
        return
    try:
        default_storage.delete(name)
    except OSError:
        logger.exception("Failed to delete resume file: name=%s", name)
    else:
        logger.info("Resume deleted: name=%s", name)


def discard_resumes(names) -> None:
    for name in names:
        discard_resume(name)
