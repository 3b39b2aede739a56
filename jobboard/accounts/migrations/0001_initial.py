# Generated manually for the email-login custom User model
from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("name", models.CharField(max_length=50, validators=[django.core.validators.MinLengthValidator(3)])),
                ("email", models.EmailField(error_messages={"unique": "Email already in use"}, max_length=254, unique=True)),
                ("role", models.CharField(choices=[("jobseeker", "Job Seeker"), ("recruiter", "Recruiter"), ("admin", "Admin")], default="jobseeker", max_length=20)),
                ("location", models.CharField(blank=True, default="my city", max_length=100)),
                ("bio", models.TextField(blank=True, default="", max_length=500)),
                ("company", models.CharField(blank=True, default="", max_length=100)),
                ("position", models.CharField(blank=True, default="", max_length=100)),
                ("is_active", models.BooleanField(default=True)),
                ("is_staff", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={"ordering": ["-created_at"]},
        ),
    ]
