"""WSGI entry point for paybridge."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "paybridge.settings")

application = get_wsgi_application()
