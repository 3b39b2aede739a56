"""
WSGI config for the jobboard API project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "jobboard_api.settings")

application = get_wsgi_application()
