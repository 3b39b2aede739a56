from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Tag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Job",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=100)),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=100)),
                ("salary", models.PositiveIntegerField()),
                ("salary_type", models.CharField(choices=[("Year", "per year"), ("Month", "per month"), ("Week", "per week"), ("Hour", "per hour")], default="Year", max_length=10)),
                ("negotiable", models.BooleanField(default=False)),
                ("job_type", models.CharField(choices=[("full-time", "Full-time"), ("part-time", "Part-time"), ("contract", "Contract"), ("internship", "Internship"), ("remote", "Remote")], default="full-time", max_length=20)),
                ("skills", models.TextField(blank=True, default="", help_text="Comma separated skills.")),
                ("status", models.CharField(choices=[("open", "Open"), ("closed", "Closed"), ("draft", "Draft")], default="open", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="jobs", to=settings.AUTH_USER_MODEL)),
                ("tags", models.ManyToManyField(blank=True, related_name="jobs", to="jobs.tag")),
                ("likes", models.ManyToManyField(blank=True, related_name="saved_jobs", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["status", "-created_at"], name="job_status_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="JobApplication",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("resume", models.FileField(max_length=255, upload_to="resumes/")),
                ("phone_number", models.CharField(max_length=30)),
                ("cover_letter", models.TextField(blank=True, default="")),
                ("applied_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("status", models.CharField(choices=[("pending", "Pending"), ("reviewed", "Reviewed"), ("rejected", "Rejected"), ("shortlisted", "Shortlisted"), ("hired", "Hired")], default="pending", max_length=20)),
                ("applicant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="applications", to=settings.AUTH_USER_MODEL)),
                ("job", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="applications", to="jobs.job")),
            ],
            options={
                "ordering": ["applied_at", "id"],
                "constraints": [models.UniqueConstraint(fields=("job", "applicant"), name="unique_application_per_applicant")],
            },
        ),
    ]
