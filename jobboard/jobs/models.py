from django.conf import settings
from django.db import models
from django.utils import timezone


def _tokenize_csv(value):
    """Split a comma separated string (or an iterable of strings) into clean lowercase tokens."""
    if not value:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = [str(v) for v in value]
    out = []
    for part in parts:
        token = part.strip().lower()
        if token and token not in out:
            out.append(token)
    return out


class JobType(models.TextChoices):
    FULL_TIME = "full-time", "Full-time"
    PART_TIME = "part-time", "Part-time"
    CONTRACT = "contract", "Contract"
    INTERNSHIP = "internship", "Internship"
    REMOTE = "remote", "Remote"


class SalaryType(models.TextChoices):
    YEAR = "Year", "per year"
    MONTH = "Month", "per month"
    WEEK = "Week", "per week"
    HOUR = "Hour", "per hour"


class JobStatus(models.TextChoices):
    OPEN = "open", "Open"
    CLOSED = "closed", "Closed"
    DRAFT = "draft", "Draft"


class ApplicationStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    REVIEWED = "reviewed", "Reviewed"
    REJECTED = "rejected", "Rejected"
    SHORTLISTED = "shortlisted", "Shortlisted"
    HIRED = "hired", "Hired"


class Tag(models.Model):
    name = models.CharField(max_length=50, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class JobQuerySet(models.QuerySet):
    def recent(self):
        return self.order_by("-created_at", "-id")

    def open(self):
        return self.filter(status=JobStatus.OPEN)

    def for_owner(self, user_id):
        return self.filter(owner_id=user_id)

    def search(self, *, tags=None, location=None, title=None):
        """AND together the provided filters; empty ones are ignored.

        ``tags`` matches when the job shares at least one tag with the input.
        """
        qs = self
        tag_names = _tokenize_csv(tags)
        if tag_names:
            matching = Tag.objects.filter(name__in=tag_names).values("jobs")
            qs = qs.filter(id__in=matching)
        location = (location or "").strip()
        if location:
            qs = qs.filter(location__icontains=location)
        title = (title or "").strip()
        if title:
            qs = qs.filter(title__icontains=title)
        return qs

    def with_relations(self):
        return self.select_related("owner").prefetch_related("tags", "likes", "applications")


class Job(models.Model):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="jobs")
    title = models.CharField(max_length=100)
    description = models.TextField()
    location = models.CharField(max_length=100)

    salary = models.PositiveIntegerField()
    salary_type = models.CharField(max_length=10, choices=SalaryType.choices, default=SalaryType.YEAR)
    negotiable = models.BooleanField(default=False)

    job_type = models.CharField(max_length=20, choices=JobType.choices, default=JobType.FULL_TIME)
    tags = models.ManyToManyField(Tag, related_name="jobs", blank=True)
    skills = models.TextField(blank=True, default="", help_text="Comma separated skills.")

    status = models.CharField(max_length=10, choices=JobStatus.choices, default=JobStatus.OPEN)
    likes = models.ManyToManyField(settings.AUTH_USER_MODEL, related_name="saved_jobs", blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = JobQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [models.Index(fields=["status", "-created_at"], name="job_status_created_idx")]

    def __str__(self):
        return self.title

    def skills_list(self):
        return _tokenize_csv(self.skills)

    def tag_names(self):
        return sorted(tag.name for tag in self.tags.all())

    def set_tags(self, names):
        tags = [Tag.objects.get_or_create(name=name)[0] for name in _tokenize_csv(names)]
        self.tags.set(tags)

    def applicant_ids(self):
        """Flat list of applicant ids, the shape older clients expect."""
        return [application.applicant_id for application in self.applications.all()]

    def like_ids(self):
        return sorted(user.pk for user in self.likes.all())

    @property
    def is_open(self):
        return self.status == JobStatus.OPEN


class JobApplicationQuerySet(models.QuerySet):
    def for_job(self, job):
        return self.filter(job=job)


class JobApplication(models.Model):
    job = models.ForeignKey(Job, on_delete=models.CASCADE, related_name="applications")
    applicant = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="applications")
    resume = models.FileField(upload_to="resumes/", max_length=255)
    phone_number = models.CharField(max_length=30)
    cover_letter = models.TextField(blank=True, default="")
    applied_at = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=20, choices=ApplicationStatus.choices, default=ApplicationStatus.PENDING)

    objects = JobApplicationQuerySet.as_manager()

    class Meta:
        ordering = ["applied_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["job", "applicant"], name="unique_application_per_applicant"),
        ]

    def __str__(self):
        return f"{self.applicant_id} → {self.job.title}"
