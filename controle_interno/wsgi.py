"""
WSGI config for controle_interno project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'controle_interno.settings')

application = get_wsgi_application()
