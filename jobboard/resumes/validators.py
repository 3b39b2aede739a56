import os

from django.conf import settings

from jobboard_api.errors import ValidationFailure


def resume_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def validate_resume(upload) -> None:
    """Check presence, type and size of an uploaded resume.

    Each problem raises its own ``ValidationFailure`` so clients can tell a
    missing file from a wrong type or an oversized one.
    """
    if upload is None:
        raise ValidationFailure("Resume is required", field="resume")

    allowed = tuple(settings.RESUME_ALLOWED_EXTENSIONS)
    if resume_extension(upload.name) not in allowed:
        raise ValidationFailure("Only PDF, DOC, and DOCX files are allowed", field="resume")

    max_size = settings.RESUME_MAX_UPLOAD_SIZE
    if upload.size > max_size:
        raise ValidationFailure(
            f"File size must be less than {max_size // (1024 * 1024)}MB",
            field="resume",
        )
