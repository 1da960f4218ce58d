"""
WSGI config for pastoral_familiar project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pastoral_familiar.settings")

application = get_wsgi_application()
