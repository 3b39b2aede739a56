import json
import tempfile
from io import StringIO
from unittest import mock

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import call_command
from django.db import IntegrityError
from django.test import TestCase, override_settings
from django.test.client import MULTIPART_CONTENT, BOUNDARY, encode_multipart
from django.urls import reverse

from accounts.models import User
from accounts.tokens import Identity, issue_token
from jobboard_api.errors import AuthorizationFailure, Conflict, NotFound, ValidationFailure

from . import services
from .models import ApplicationStatus, Job, JobApplication, JobStatus


def identity_for(user):
    return Identity(user_id=user.pk, name=user.name, role=user.role)


def auth(user):
    return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(user)}"}


def job_fields(**overrides):
    fields = {
        "title": "Backend Developer",
        "description": "Work with Django and PostgreSQL",
        "location": "Remote",
        "salary": 90000,
        "jobType": "full-time",
        "tags": ["Backend", "python"],
        "skills": "python, django, sql",
    }
    fields.update(overrides)
    return fields


def pdf(name="cv.pdf", content=b"%PDF-1.4 resume"):
    return SimpleUploadedFile(name, content, content_type="application/pdf")


class JobBoardTestCase(TestCase):
    def setUp(self):
        media = tempfile.TemporaryDirectory()
        self.addCleanup(media.cleanup)
        override = self.settings(MEDIA_ROOT=media.name)
        override.enable()
        self.addCleanup(override.disable)

        self.recruiter = User.objects.create_user(
            email="rec@example.com", password="secret1", name="Rita Recruiter", role=User.Role.RECRUITER, company="ACME"
        )
        self.other_recruiter = User.objects.create_user(
            email="rec2@example.com", password="secret1", name="Oscar Other", role=User.Role.RECRUITER
        )
        self.seeker = User.objects.create_user(email="js@example.com", password="secret1", name="Sam Seeker")
        self.other_seeker = User.objects.create_user(email="js2@example.com", password="secret1", name="Tina Seeker")

    def make_job(self, owner=None, **overrides):
        return services.create_job(identity_for(owner or self.recruiter), job_fields(**overrides))

    def apply(self, user, job, **kwargs):
        kwargs.setdefault("resume", pdf())
        kwargs.setdefault("phone_number", "+44 7700 900123")
        return services.apply_to_job(identity_for(user), job.pk, **kwargs)

    def resume_files(self):
        if not default_storage.exists("resumes"):
            return []
        return default_storage.listdir("resumes")[1]


class CreateJobTests(JobBoardTestCase):
    def test_recruiter_creates_open_job(self):
        job = self.make_job(status="closed")
        self.assertEqual(job.status, JobStatus.OPEN)
        self.assertEqual(job.owner, self.recruiter)
        self.assertEqual(job.tag_names(), ["backend", "python"])
        self.assertEqual(job.skills_list(), ["python", "django", "sql"])
        self.assertEqual(job.salary_type, "Year")

    def test_jobseeker_cannot_create(self):
        with self.assertRaises(AuthorizationFailure):
            self.make_job(owner=self.seeker)
        self.assertFalse(Job.objects.exists())

    def test_stale_recruiter_claim_is_checked_against_database(self):
        identity = Identity(user_id=self.seeker.pk, name=self.seeker.name, role=User.Role.RECRUITER)
        with self.assertRaises(AuthorizationFailure):
            services.create_job(identity, job_fields())

    def test_required_fields(self):
        for missing, message in [
            ("title", "Title is required"),
            ("description", "Description is required"),
            ("location", "Location is required"),
            ("salary", "Salary is required"),
            ("tags", "Tags are required"),
            ("skills", "Skills are required"),
        ]:
            fields = job_fields()
            del fields[missing]
            with self.subTest(missing=missing):
                with self.assertRaises(ValidationFailure) as ctx:
                    services.create_job(identity_for(self.recruiter), fields)
                self.assertEqual(ctx.exception.message, message)
                self.assertEqual(ctx.exception.field, missing)

    def test_zero_salary_counts_as_missing(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.make_job(salary=0)
        self.assertEqual(ctx.exception.message, "Salary is required")

    def test_invalid_job_type_uses_wire_field_name(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.make_job(jobType="freelance")
        self.assertEqual(ctx.exception.field, "jobType")

    def test_title_length(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.make_job(title="x" * 101)
        self.assertEqual(ctx.exception.message, "Job title cannot exceed 100 characters")

    def test_http_create_ignores_owner_in_body(self):
        resp = self.client.post(
            reverse("jobs"),
            data=json.dumps(job_fields(postedBy=self.other_recruiter.pk, owner=self.other_recruiter.pk)),
            content_type="application/json",
            **auth(self.recruiter),
        )
        self.assertEqual(resp.status_code, 201)
        job = resp.json()["job"]
        self.assertEqual(job["postedBy"], {"id": self.recruiter.pk, "name": "Rita Recruiter", "company": "ACME"})
        self.assertEqual(job["status"], "open")
        self.assertEqual(job["applicants"], [])

    def test_http_create_requires_recruiter_role(self):
        resp = self.client.post(
            reverse("jobs"), data=json.dumps(job_fields()), content_type="application/json", **auth(self.seeker)
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["message"], "Not authorized as jobseeker")

    def test_http_create_requires_token(self):
        resp = self.client.post(reverse("jobs"), data=json.dumps(job_fields()), content_type="application/json")
        self.assertEqual(resp.status_code, 401)


class BrowseAndSearchTests(JobBoardTestCase):
    def setUp(self):
        super().setUp()
        self.backend = self.make_job(title="Backend Developer", location="Remote", tags=["backend", "python"])
        self.designer = self.make_job(
            title="UI Designer", location="London", jobType="contract", tags=["design"], skills="figma"
        )
        self.closed = self.make_job(title="Closed Backend Role", tags=["backend"])
        services.update_job(identity_for(self.recruiter), self.closed.pk, {"status": "closed"})

    def titles(self, resp):
        self.assertEqual(resp.status_code, 200)
        return [job["title"] for job in resp.json()["jobs"]]

    def test_list_returns_open_jobs_newest_first(self):
        resp = self.client.get(reverse("jobs"))
        self.assertEqual(self.titles(resp), ["UI Designer", "Backend Developer"])
        self.assertEqual(resp.json()["count"], 2)

    def test_list_filters_by_job_type(self):
        resp = self.client.get(reverse("jobs"), {"jobType": "contract"})
        self.assertEqual(self.titles(resp), ["UI Designer"])

    def test_list_ignores_unknown_job_type(self):
        resp = self.client.get(reverse("jobs"), {"jobType": "all"})
        self.assertEqual(len(self.titles(resp)), 2)

    def test_search_by_tags_matches_any(self):
        resp = self.client.get(reverse("search_jobs"), {"tags": "Python, design"})
        self.assertEqual(sorted(self.titles(resp)), ["Backend Developer", "UI Designer"])

    def test_search_filters_combine(self):
        resp = self.client.get(reverse("search_jobs"), {"tags": "backend", "location": "remo"})
        self.assertEqual(self.titles(resp), ["Backend Developer"])
        resp = self.client.get(reverse("search_jobs"), {"title": "designer", "location": "remote"})
        self.assertEqual(self.titles(resp), [])

    def test_search_without_filters_lists_open_jobs(self):
        resp = self.client.get(reverse("search_jobs"))
        self.assertNotIn("Closed Backend Role", self.titles(resp))
        self.assertEqual(
            [job.pk for job in services.search_jobs()],
            [job.pk for job in services.list_jobs()],
        )

    def test_get_job_by_id(self):
        resp = self.client.get(reverse("job_detail", args=[self.closed.pk]))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["job"]["status"], "closed")

    def test_get_missing_job(self):
        resp = self.client.get(reverse("job_detail", args=[9999]))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"success": False, "message": "Job with id 9999 not found"})

    def test_my_jobs_lists_only_own_jobs(self):
        self.make_job(owner=self.other_recruiter, title="Someone Else")
        resp = self.client.get(reverse("my_jobs"), **auth(self.recruiter))
        self.assertEqual(
            self.titles(resp), ["Closed Backend Role", "UI Designer", "Backend Developer"]
        )

    def test_semicolon_is_not_a_tag_separator(self):
        self.assertEqual(services.search_jobs(tags="backend;design"), [])
        matches = services.search_jobs(tags="design, backend")
        self.assertEqual([job.pk for job in matches], [self.designer.pk, self.backend.pk])

    def test_unknown_route(self):
        resp = self.client.get("/api/v1/nothing-here")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "Route not found: /api/v1/nothing-here")


class UpdateDeleteJobTests(JobBoardTestCase):
    def setUp(self):
        super().setUp()
        self.job = self.make_job()

    def test_partial_update_keeps_other_fields(self):
        job = services.update_job(identity_for(self.recruiter), self.job.pk, {"salary": 120000, "tags": "go"})
        self.assertEqual(job.salary, 120000)
        self.assertEqual(job.title, "Backend Developer")
        self.assertEqual(job.tag_names(), ["go"])
        self.assertEqual(job.skills_list(), ["python", "django", "sql"])

    def test_update_cannot_change_owner(self):
        services.update_job(identity_for(self.recruiter), self.job.pk, {"owner": self.other_recruiter.pk})
        self.job.refresh_from_db()
        self.assertEqual(self.job.owner_id, self.recruiter.pk)

    def test_non_owner_cannot_update(self):
        resp = self.client.patch(
            reverse("job_detail", args=[self.job.pk]),
            data=json.dumps({"title": "Hijacked"}),
            content_type="application/json",
            **auth(self.other_recruiter),
        )
        self.assertEqual(resp.status_code, 403)
        self.job.refresh_from_db()
        self.assertEqual(self.job.title, "Backend Developer")

    def test_disabled_owner_cannot_update_or_delete(self):
        headers = auth(self.recruiter)
        User.objects.filter(pk=self.recruiter.pk).update(is_active=False)
        url = reverse("job_detail", args=[self.job.pk])

        for method in (self.client.put, self.client.patch):
            resp = method(url, data=json.dumps({"title": "Renamed"}), content_type="application/json", **headers)
            self.assertEqual(resp.status_code, 401)
        resp = self.client.delete(url, **headers)
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["message"], "Authentication invalid")
        self.assertEqual(self.client.get(reverse("my_jobs"), **headers).status_code, 401)

        self.job.refresh_from_db()
        self.assertEqual(self.job.title, "Backend Developer")

    def test_update_validation(self):
        with self.assertRaises(ValidationFailure):
            services.update_job(identity_for(self.recruiter), self.job.pk, {"title": ""})

    def test_update_missing_job(self):
        with self.assertRaises(NotFound):
            services.update_job(identity_for(self.recruiter), 9999, {"title": "Nope"})

    def test_non_owner_cannot_delete(self):
        resp = self.client.delete(reverse("job_detail", args=[self.job.pk]), **auth(self.seeker))
        self.assertEqual(resp.status_code, 403)
        self.assertTrue(Job.objects.filter(pk=self.job.pk).exists())

    def test_delete_removes_applications_and_resumes(self):
        application = self.apply(self.seeker, self.job)
        self.assertTrue(default_storage.exists(application.resume.name))

        with self.captureOnCommitCallbacks(execute=True):
            resp = self.client.delete(reverse("job_detail", args=[self.job.pk]), **auth(self.recruiter))

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Job deleted successfully")
        self.assertFalse(Job.objects.filter(pk=self.job.pk).exists())
        self.assertFalse(JobApplication.objects.exists())
        self.assertFalse(default_storage.exists(application.resume.name))
        self.assertNotIn(self.job.pk, [job.pk for job in services.list_jobs()])
        self.assertEqual(services.list_jobs_by_owner(identity_for(self.recruiter)), [])
        with self.assertRaises(NotFound):
            services.get_job(self.job.pk)


class LikeJobTests(JobBoardTestCase):
    def test_like_toggles(self):
        job = self.make_job()
        url = reverse("like_job", args=[job.pk])

        first = self.client.put(url, **auth(self.seeker))
        self.assertEqual(first.status_code, 200)
        self.assertTrue(first.json()["liked"])
        self.assertEqual(first.json()["job"]["likes"], [self.seeker.pk])

        me = self.client.get(reverse("current_user"), **auth(self.seeker))
        self.assertEqual(me.json()["user"]["savedJobs"], [job.pk])

        second = self.client.put(url, **auth(self.seeker))
        self.assertFalse(second.json()["liked"])
        self.assertEqual(second.json()["job"]["likes"], [])

    def test_like_missing_job(self):
        resp = self.client.put(reverse("like_job", args=[424242]), **auth(self.seeker))
        self.assertEqual(resp.status_code, 404)


class ApplyTests(JobBoardTestCase):
    def setUp(self):
        super().setUp()
        self.job = self.make_job()

    def test_apply_creates_pending_application(self):
        application = self.apply(self.seeker, self.job, cover_letter="  Hello  ")
        self.assertEqual(application.status, ApplicationStatus.PENDING)
        self.assertEqual(application.cover_letter, "Hello")
        self.assertTrue(application.resume.name.startswith(f"resumes/{self.seeker.pk}_"))
        self.assertTrue(application.resume.name.endswith(".pdf"))
        self.assertEqual(services.get_job(self.job.pk).applicant_ids(), [self.seeker.pk])

    def test_apply_over_http_with_multipart_put(self):
        body = encode_multipart(
            BOUNDARY,
            {"resume": pdf("My CV.DOCX"), "phoneNumber": "555-0101", "coverLetter": "Pick me"},
        )
        resp = self.client.put(
            reverse("apply_job", args=[self.job.pk]), data=body, content_type=MULTIPART_CONTENT, **auth(self.seeker)
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["application"]
        self.assertEqual(data["phoneNumber"], "555-0101")
        self.assertEqual(data["status"], "pending")
        self.assertTrue(data["resumeUrl"].startswith(f"/uploads/resumes/{self.seeker.pk}_"))
        self.assertTrue(data["resumeUrl"].endswith(".docx"))

        me = self.client.get(reverse("current_user"), **auth(self.seeker))
        self.assertEqual(me.json()["user"]["appliedJobs"], [self.job.pk])

    def test_apply_over_http_with_multipart_post(self):
        resp = self.client.post(
            reverse("apply_job", args=[self.job.pk]),
            {"resume": pdf(), "phoneNumber": "555-0102"},
            **auth(self.seeker),
        )
        self.assertEqual(resp.status_code, 200)

    def test_apply_requires_token(self):
        resp = self.client.post(reverse("apply_job", args=[self.job.pk]), {"resume": pdf(), "phoneNumber": "1"})
        self.assertEqual(resp.status_code, 401)

    def test_duplicate_application(self):
        self.apply(self.seeker, self.job)
        with self.assertRaises(Conflict) as ctx:
            self.apply(self.seeker, self.job)
        self.assertEqual(ctx.exception.message, "You have already applied to this job")
        self.assertEqual(JobApplication.objects.count(), 1)
        self.assertEqual(len(self.resume_files()), 1)
        self.assertEqual(services.get_job(self.job.pk).applicant_ids(), [self.seeker.pk])

    def test_closed_job_rejects_applications(self):
        services.update_job(identity_for(self.recruiter), self.job.pk, {"status": "closed"})
        with self.assertRaises(Conflict) as ctx:
            self.apply(self.seeker, self.job)
        self.assertEqual(ctx.exception.message, "This job is no longer accepting applications")
        self.assertEqual(self.resume_files(), [])

    def test_missing_job(self):
        with self.assertRaises(NotFound):
            services.apply_to_job(identity_for(self.seeker), 9999, resume=pdf(), phone_number="1")

    def test_phone_number_required(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.apply(self.seeker, self.job, phone_number="   ")
        self.assertEqual(ctx.exception.field, "phoneNumber")

    def test_phone_number_must_be_text(self):
        resp = self.client.put(
            reverse("apply_job", args=[self.job.pk]),
            data=json.dumps({"phoneNumber": 5551234}),
            content_type="application/json",
            **auth(self.seeker),
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(
            resp.json(), {"success": False, "message": "Phone number must be text", "field": "phoneNumber"}
        )

    def test_cover_letter_must_be_text(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.apply(self.seeker, self.job, cover_letter=["not", "text"])
        self.assertEqual(ctx.exception.field, "coverLetter")
        self.assertEqual(self.resume_files(), [])

    def test_malformed_multipart_body(self):
        url = reverse("apply_job", args=[self.job.pk])
        for method in (self.client.put, self.client.post):
            resp = method(url, data=b"garbage", content_type="multipart/form-data", **auth(self.seeker))
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json(), {"success": False, "message": "Malformed multipart body"})
        self.assertFalse(JobApplication.objects.exists())

    @override_settings(DATA_UPLOAD_MAX_MEMORY_SIZE=16)
    def test_oversized_body_is_a_bad_request(self):
        resp = self.client.put(
            reverse("apply_job", args=[self.job.pk]),
            data=json.dumps({"phoneNumber": "555-0101", "coverLetter": "x" * 64}),
            content_type="application/json",
            **auth(self.seeker),
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"success": False, "message": "Bad request"})

    @override_settings(DATA_UPLOAD_MAX_NUMBER_FIELDS=1)
    def test_too_many_fields_is_a_bad_request(self):
        fields = {f"field{i}": "x" for i in range(5)}
        fields.update({"resume": pdf(), "phoneNumber": "555-0101"})
        resp = self.client.put(
            reverse("apply_job", args=[self.job.pk]),
            data=encode_multipart(BOUNDARY, fields),
            content_type=MULTIPART_CONTENT,
            **auth(self.seeker),
        )
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(JobApplication.objects.exists())

    def test_resume_required(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.apply(self.seeker, self.job, resume=None)
        self.assertEqual(ctx.exception.message, "Resume is required")

    def test_resume_type_checked(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.apply(self.seeker, self.job, resume=pdf("cv.exe"))
        self.assertEqual(ctx.exception.message, "Only PDF, DOC, and DOCX files are allowed")
        self.assertEqual(self.resume_files(), [])

    def test_resume_size_checked(self):
        with self.assertRaises(ValidationFailure) as ctx:
            self.apply(self.seeker, self.job, resume=pdf(content=b"x" * (5 * 1024 * 1024 + 1)))
        self.assertEqual(ctx.exception.message, "File size must be less than 5MB")
        self.assertEqual(self.resume_files(), [])

    def test_stored_file_removed_when_insert_loses_race(self):
        with mock.patch.object(JobApplication.objects, "create", side_effect=IntegrityError("duplicate")):
            with self.assertRaises(Conflict):
                self.apply(self.seeker, self.job)
        self.assertEqual(self.resume_files(), [])
        self.assertFalse(JobApplication.objects.exists())

    def test_stored_file_removed_on_unexpected_error(self):
        with mock.patch.object(JobApplication.objects, "create", side_effect=RuntimeError("db down")):
            with self.assertRaises(RuntimeError):
                self.apply(self.seeker, self.job)
        self.assertEqual(self.resume_files(), [])

    def test_recruiter_may_apply_to_another_job(self):
        application = self.apply(self.other_recruiter, self.job)
        self.assertEqual(application.applicant, self.other_recruiter)


class ApplicantTrackingTests(JobBoardTestCase):
    def setUp(self):
        super().setUp()
        self.job = self.make_job()
        self.other_job = self.make_job(owner=self.other_recruiter, title="Other Role")
        self.first = self.apply(self.seeker, self.job, cover_letter="First")
        self.second = self.apply(self.other_seeker, self.job)
        self.elsewhere = self.apply(self.seeker, self.other_job)

    def test_owner_lists_applicants_in_application_order(self):
        resp = self.client.get(reverse("job_applicants", args=[self.job.pk]), **auth(self.recruiter))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["jobTitle"], "Backend Developer")
        self.assertEqual(data["count"], 2)
        first = data["applications"][0]
        self.assertEqual(first["id"], self.first.pk)
        self.assertEqual(first["coverLetter"], "First")
        self.assertEqual(first["applicant"]["email"], "js@example.com")
        self.assertNotIn("password", first["applicant"])

    def test_public_job_payload_hides_applicant_details(self):
        job = self.client.get(reverse("job_detail", args=[self.job.pk])).json()["job"]
        self.assertEqual(job["applicants"], [self.seeker.pk, self.other_seeker.pk])

    def test_non_owner_cannot_list_applicants(self):
        for user in (self.other_recruiter, self.seeker):
            resp = self.client.get(reverse("job_applicants", args=[self.job.pk]), **auth(user))
            self.assertEqual(resp.status_code, 403)

    def test_owner_updates_status(self):
        resp = self.client.put(
            reverse("job_applicants", args=[self.job.pk]),
            data=json.dumps({"applicationId": self.first.pk, "status": "shortlisted"}),
            content_type="application/json",
            **auth(self.recruiter),
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Application status updated to shortlisted")
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, ApplicationStatus.SHORTLISTED)

    def test_disabled_owner_loses_applicant_access(self):
        headers = auth(self.recruiter)
        User.objects.filter(pk=self.recruiter.pk).update(is_active=False)
        url = reverse("job_applicants", args=[self.job.pk])

        self.assertEqual(self.client.get(url, **headers).status_code, 401)
        resp = self.client.put(
            url,
            data=json.dumps({"applicationId": self.first.pk, "status": "hired"}),
            content_type="application/json",
            **headers,
        )
        self.assertEqual(resp.status_code, 401)
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, ApplicationStatus.PENDING)

    def test_any_status_may_follow_any_other(self):
        identity = identity_for(self.recruiter)
        services.update_application_status(identity, self.job.pk, self.first.pk, "hired")
        application = services.update_application_status(identity, self.job.pk, self.first.pk, "pending")
        self.assertEqual(application.status, ApplicationStatus.PENDING)

    def test_status_must_be_known(self):
        with self.assertRaises(ValidationFailure) as ctx:
            services.update_application_status(identity_for(self.recruiter), self.job.pk, self.first.pk, "interview")
        self.assertEqual(ctx.exception.field, "status")

    def test_status_and_id_required(self):
        with self.assertRaises(ValidationFailure) as ctx:
            services.update_application_status(identity_for(self.recruiter), self.job.pk, None, "hired")
        self.assertEqual(ctx.exception.message, "Please provide applicationId and status")

    def test_non_owner_cannot_update_status(self):
        with self.assertRaises(AuthorizationFailure):
            services.update_application_status(identity_for(self.other_recruiter), self.job.pk, self.first.pk, "hired")
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, ApplicationStatus.PENDING)

    def test_application_must_belong_to_job(self):
        with self.assertRaises(NotFound) as ctx:
            services.update_application_status(
                identity_for(self.recruiter), self.job.pk, self.elsewhere.pk, "hired"
            )
        self.assertEqual(ctx.exception.message, f"Application with id {self.elsewhere.pk} not found")

    def test_unknown_application_leaves_others_untouched(self):
        with self.assertRaises(NotFound):
            services.update_application_status(identity_for(self.recruiter), self.job.pk, 999999, "hired")
        statuses = set(JobApplication.objects.values_list("status", flat=True))
        self.assertEqual(statuses, {ApplicationStatus.PENDING})


class SeedDemoDataTests(JobBoardTestCase):
    def test_seed_is_repeatable(self):
        options = {"recruiters": 2, "jobseekers": 3, "jobs_per_recruiter": 2, "applications_per_seeker": 2}
        call_command("seed_demo_data", stdout=StringIO(), **options)
        self.assertEqual(User.objects.filter(email__startswith="demo_recruiter_").count(), 2)
        self.assertEqual(Job.objects.filter(owner__email__startswith="demo_").count(), 4)
        self.assertEqual(JobApplication.objects.count(), 6)

        call_command("seed_demo_data", stdout=StringIO(), **options)
        self.assertEqual(Job.objects.filter(owner__email__startswith="demo_").count(), 4)
        self.assertEqual(JobApplication.objects.count(), 6)

    def test_wipe_removes_stored_resumes(self):
        options = {"recruiters": 1, "jobseekers": 2, "jobs_per_recruiter": 2, "applications_per_seeker": 1}
        call_command("seed_demo_data", stdout=StringIO(), **options)
        stored = list(JobApplication.objects.values_list("resume", flat=True))
        self.assertEqual(len(stored), 2)

        with self.captureOnCommitCallbacks(execute=True):
            call_command("seed_demo_data", stdout=StringIO(), wipe=True, **dict(options, applications_per_seeker=0))

        self.assertFalse(JobApplication.objects.exists())
        for name in stored:
            self.assertFalse(default_storage.exists(name))
        self.assertEqual(self.resume_files(), [])
