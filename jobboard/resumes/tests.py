import tempfile
from datetime import datetime, timezone

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, override_settings

from jobboard_api.errors import ValidationFailure

from .storage import discard_resume, resume_storage_name, save_resume
from .validators import resume_extension, validate_resume

MiB = 1024 * 1024


class ResumeValidatorTests(SimpleTestCase):
    def test_extension_is_lowercased(self):
        self.assertEqual(resume_extension("CV.PDF"), ".pdf")
        self.assertEqual(resume_extension("archive.tar.docx"), ".docx")
        self.assertEqual(resume_extension("noext"), "")

    def test_accepts_allowed_types(self):
        for name in ("cv.pdf", "CV.PDF", "cv.doc", "CV.DOCX"):
            with self.subTest(name=name):
                validate_resume(SimpleUploadedFile(name, b"data"))

    def test_rejects_other_types(self):
        for name in ("cv.exe", "cv.txt", "cv.pdf.exe", "cv"):
            with self.subTest(name=name):
                with self.assertRaises(ValidationFailure) as ctx:
                    validate_resume(SimpleUploadedFile(name, b"data"))
                self.assertEqual(ctx.exception.field, "resume")

    def test_missing_upload(self):
        with self.assertRaises(ValidationFailure) as ctx:
            validate_resume(None)
        self.assertEqual(ctx.exception.message, "Resume is required")

    def test_size_limit_is_inclusive(self):
        validate_resume(SimpleUploadedFile("cv.pdf", b"x" * (5 * MiB)))
        with self.assertRaises(ValidationFailure) as ctx:
            validate_resume(SimpleUploadedFile("cv.pdf", b"x" * (5 * MiB + 1)))
        self.assertEqual(ctx.exception.message, "File size must be less than 5MB")

    @override_settings(RESUME_MAX_UPLOAD_SIZE=2 * MiB)
    def test_size_limit_follows_settings(self):
        with self.assertRaises(ValidationFailure) as ctx:
            validate_resume(SimpleUploadedFile("cv.pdf", b"x" * (2 * MiB + 1)))
        self.assertEqual(ctx.exception.message, "File size must be less than 2MB")


class ResumeStorageTests(SimpleTestCase):
    def setUp(self):
        media = tempfile.TemporaryDirectory()
        self.addCleanup(media.cleanup)
        override = self.settings(MEDIA_ROOT=media.name)
        override.enable()
        self.addCleanup(override.disable)

    def test_storage_name_ignores_client_filename(self):
        now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        name = resume_storage_name(42, "../../etc/My Resume.PDF", now=now)
        self.assertEqual(name, f"resumes/42_{int(now.timestamp() * 1000)}.pdf")

    def test_save_and_discard(self):
        stored = save_resume(7, SimpleUploadedFile("cv.docx", b"resume"))
        self.assertTrue(stored.startswith("resumes/7_"))
        self.assertTrue(stored.endswith(".docx"))
        self.assertTrue(default_storage.exists(stored))

        discard_resume(stored)
        self.assertFalse(default_storage.exists(stored))

    def test_discard_tolerates_missing_names(self):
        discard_resume("")
        discard_resume("resumes/does-not-exist.pdf")
