import random

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Q

from accounts.tokens import Identity
from jobboard_api.errors import ApiError
from jobs import services
from jobs.constants import COMPANY_NAMES, DEMO_LOCATIONS, DEMO_SKILLS, DEMO_TAGS, JOB_TEMPLATES
from jobs.models import ApplicationStatus, Job, JobApplication, JobType, SalaryType
from resumes.storage import discard_resumes

User = get_user_model()


class Command(BaseCommand):
    help = "Seed realistic demo data (recruiters, job seekers, jobs, applications, likes)."

    def add_arguments(self, parser):
        parser.add_argument("--prefix", type=str, default="demo")
        parser.add_argument("--recruiters", type=int, default=4)
        parser.add_argument("--jobseekers", type=int, default=10)
        parser.add_argument("--jobs-per-recruiter", type=int, default=4)
        parser.add_argument("--applications-per-seeker", type=int, default=3)
        parser.add_argument("--password", type=str, default="DemoPass123!")
        parser.add_argument("--seed", type=int, default=42)
        parser.add_argument("--wipe", action="store_true", help="Delete existing users whose email starts with prefix before seeding.")

    def _skills(self, rnd, minimum=3, maximum=5):
        return sorted(rnd.sample(DEMO_SKILLS, rnd.randint(minimum, maximum)))

    def _make_user(self, email, name, role, password, **profile):
        user, _ = User.objects.get_or_create(email=email, defaults={"name": name, "role": role})
        # Keep demo credentials predictable.
        user.name = name
        user.role = role
        user.is_active = True
        for field, value in profile.items():
            setattr(user, field, value)
        user.set_password(password)
        user.save()
        return user

    def _identity(self, user):
        return Identity(user_id=user.pk, name=user.name, role=user.role)

    def _resume(self, user):
        content = f"Resume for {user.name}\nPosition: {user.position}\n".encode()
        return SimpleUploadedFile(f"{user.pk}_resume.pdf", content, content_type="application/pdf")

    @transaction.atomic
    def handle(self, *args, **opts):
        rnd = random.Random(opts["seed"])
        prefix = (opts["prefix"] or "demo").strip().lower()
        recruiters_n = max(1, int(opts["recruiters"]))
        seekers_n = max(1, int(opts["jobseekers"]))
        jobs_per_recruiter = max(1, int(opts["jobs_per_recruiter"]))
        apps_per_seeker = max(0, int(opts["applications_per_seeker"]))
        password = opts["password"]

        if opts["wipe"]:
            email_prefix = f"{prefix}_"
            resumes = list(
                JobApplication.objects.filter(
                    Q(applicant__email__startswith=email_prefix) | Q(job__owner__email__startswith=email_prefix)
                ).values_list("resume", flat=True)
            )
            deleted, _ = User.objects.filter(email__startswith=email_prefix).delete()
            self.stdout.write(f"Wiped {deleted} rows for prefix '{prefix}'.")
            transaction.on_commit(lambda: discard_resumes(resumes))

        created_jobs = []
        recruiter_creds = []
        seeker_creds = []

        for i in range(1, recruiters_n + 1):
            email = f"{prefix}_recruiter_{i}@example.com"
            company = f"{COMPANY_NAMES[(i - 1) % len(COMPANY_NAMES)]} {i}"
            user = self._make_user(
                email,
                f"Demo Recruiter {i}",
                User.Role.RECRUITER,
                password,
                company=company,
                position="Talent Partner",
                location=DEMO_LOCATIONS[i % len(DEMO_LOCATIONS)],
            )
            identity = self._identity(user)

            existing = {job.title for job in services.list_jobs_by_owner(identity)}
            for j in range(1, jobs_per_recruiter + 1):
                title_base, description, tag = JOB_TEMPLATES[(j + i - 2) % len(JOB_TEMPLATES)]
                title = f"{title_base} - Team {i}.{j}"
                if title in existing:
                    continue
                job = services.create_job(
                    identity,
                    {
                        "title": title,
                        "description": description,
                        "location": DEMO_LOCATIONS[(i + j) % len(DEMO_LOCATIONS)],
                        "salary": rnd.randrange(35_000, 140_000, 1_000),
                        "salaryType": SalaryType.YEAR,
                        "negotiable": rnd.random() < 0.3,
                        "jobType": rnd.choice(JobType.values),
                        "tags": [tag] + rnd.sample(DEMO_TAGS, 1),
                        "skills": self._skills(rnd),
                    },
                )
                created_jobs.append(job)
            recruiter_creds.append((email, password))

        # independent of how many jobs were created above
        rnd = random.Random(opts["seed"] + 1)
        open_jobs = list(Job.objects.open().filter(owner__email__startswith=f"{prefix}_").order_by("id"))
        for i in range(1, seekers_n + 1):
            email = f"{prefix}_seeker_{i}@example.com"
            user = self._make_user(
                email,
                f"Demo Seeker {i}",
                User.Role.JOBSEEKER,
                password,
                bio="Engineer looking for the next challenge. Skills: " + ", ".join(self._skills(rnd)),
                location=rnd.choice(DEMO_LOCATIONS),
                position="Software Engineer",
            )
            identity = self._identity(user)
            seeker_creds.append((email, password))

            for job in rnd.sample(open_jobs, k=min(2, len(open_jobs))):
                if not job.likes.filter(pk=user.pk).exists():
                    services.like_job(identity, job.pk)

            for job in rnd.sample(open_jobs, k=min(apps_per_seeker, len(open_jobs))):
                status = rnd.choices(ApplicationStatus.values, weights=[50, 20, 10, 15, 5], k=1)[0]
                try:
                    application = services.apply_to_job(
                        identity,
                        job.pk,
                        resume=self._resume(user),
                        phone_number=f"+44-77-9000-{2000 + i}",
                        cover_letter="I am interested in this role and believe my background is a strong fit.",
                    )
                except ApiError as exc:
                    # already applied on a previous run
                    self.stdout.write(f"  skipped {email} -> job {job.pk}: {exc.message}")
                    continue

                if status != ApplicationStatus.PENDING:
                    services.update_application_status(
                        self._identity(job.owner), job.pk, application.pk, status
                    )

        self.stdout.write(self.style.SUCCESS("Seeded demo data successfully."))
        self.stdout.write(f"Created/updated recruiters: {recruiters_n}")
        self.stdout.write(f"Created/updated job seekers: {seekers_n}")
        self.stdout.write(f"Created jobs: {len(created_jobs)}")
        self.stdout.write("")
        self.stdout.write("Sample credentials:")
        for email, pwd in recruiter_creds[:3]:
            self.stdout.write(f"  {email} / {pwd}")
        for email, pwd in seeker_creds[:3]:
            self.stdout.write(f"  {email} / {pwd}")
