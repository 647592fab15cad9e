"""
Local development settings.
"""
import os

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

TRUSTED_REQUEST_ORIGINS = env_list('TRUSTED_REQUEST_ORIGINS', 'http://localhost:3000')

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.environ.get('POSTGRES_DB', 'freshmarket'),
        'USER': os.environ.get('POSTGRES_USER', 'postgres'),
        'PASSWORD': os.environ.get('POSTGRES_PASSWORD', 'postgres'),
        'HOST': os.environ.get('POSTGRES_HOST', 'localhost'),
        'PORT': os.environ.get('POSTGRES_PORT', '5432'),
    }
}
