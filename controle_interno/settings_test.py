"""
Test settings: in-memory database, no seeding, quiet logging.
"""

from .settings import *  # noqa: F401,F403

SEED_ON_STARTUP = False
EXPOSE_INTERNAL_ERRORS = True

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    'DEFAULT_RENDERER_CLASSES': ['rest_framework.renderers.JSONRenderer'],
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOGGING = {
    **LOGGING,  # noqa: F405
    'handlers': {
        **LOGGING['handlers'],  # noqa: F405
        'console': {
            'level': 'CRITICAL',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'filters': ['request_id'],
        },
    },
}
