"""
Django settings for the jobboard API project.
"""
from pathlib import Path
import os
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-3v@x1c9!hq_o2b7^m$4r+z8w#k0e5t&j6n-d2s(p9u)lfa7y")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

_default_allowed_hosts = ["127.0.0.1", "localhost", "testserver"]
ALLOWED_HOSTS = (
    os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",")
    if os.getenv("DJANGO_ALLOWED_HOSTS")
    else _default_allowed_hosts
)

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "accounts",
    "jobs",
    "resumes",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "accounts.middleware.BearerTokenMiddleware",
    "jobboard_api.middleware.ApiErrorMiddleware",
]

ROOT_URLCONF = "jobboard_api.urls"

# Only the admin renders templates; the public surface is JSON.
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

WSGI_APPLICATION = "jobboard_api.wsgi.application"

# -----------------------------
# Database (PostgreSQL)
# -----------------------------
DB_ENGINE = os.getenv("DB_ENGINE", "django.db.backends.postgresql").strip()
if DB_ENGINE in {"sqlite", "sqlite3", "django.db.backends.sqlite3"}:
    raise ImproperlyConfigured("SQLite is disabled for this project. Please configure PostgreSQL in .env.")
if DB_ENGINE != "django.db.backends.postgresql":
    raise ImproperlyConfigured("Only PostgreSQL is supported. Set DB_ENGINE=django.db.backends.postgresql")

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DB_NAME", "jobboard_db"),
        "USER": os.getenv("DB_USER", "job_user"),
        "PASSWORD": os.getenv("DB_PASSWORD", "YourStrongPassHere"),
        "HOST": os.getenv("DB_HOST", "127.0.0.1"),
        "PORT": os.getenv("DB_PORT", "5432"),
    }
}

# -----------------------------
# Custom User Model (email login)
# -----------------------------
AUTH_USER_MODEL = "accounts.User"

# -----------------------------
# Bearer tokens
# -----------------------------
# Lifetime in seconds, 30 days by default.
AUTH_TOKEN_MAX_AGE = int(os.getenv("AUTH_TOKEN_MAX_AGE", str(60 * 60 * 24 * 30)))
AUTH_TOKEN_SALT = "accounts.tokens"

# -----------------------------
# Password validation
# -----------------------------
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
        "OPTIONS": {"user_attributes": ("name", "email")},
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 6},
    },
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
MEDIA_URL = "/uploads/"
MEDIA_ROOT = BASE_DIR / "uploads"

# -----------------------------
# Resume uploads
# -----------------------------
RESUME_MAX_UPLOAD_SIZE = int(os.getenv("RESUME_MAX_UPLOAD_SIZE", str(5 * 1024 * 1024)))
RESUME_ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx")

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------
# Logging
# -----------------------------
LOG_DIR = BASE_DIR / "logs"
LOG_DIR.mkdir(exist_ok=True)
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "[{levelname}] {asctime} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "standard"},
        "file": {
            "class": "logging.FileHandler",
            "filename": str(LOG_DIR / "jobboard.log"),
            "formatter": "standard",
            "level": "INFO",
        },
    },
    "root": {"handlers": ["console", "file"], "level": os.getenv("LOG_LEVEL", "INFO")},
}
