"""
WSGI config for the stationery inventory portal.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'stationery.config.settings')

application = get_wsgi_application()
