"""Development settings for ETNAir.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and opening CORS
to any origin. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Any local frontend may call the API
CORS_ALLOW_ALL_ORIGINS = True

# Static files are served from the app directories without a manifest
STORAGES['staticfiles'] = {  # noqa: F405
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
