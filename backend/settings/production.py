"""
Production settings for the Stock Watchlist project.
"""

import os
from .base import *

DEBUG = False

# Secret key - required at runtime, but allow build-time with dummy value
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'build-time-dummy-key-replace-at-runtime')

if SECRET_KEY == 'build-time-dummy-key-replace-at-runtime':
    import warnings
    warnings.warn("DJANGO_SECRET_KEY not set - using dummy key (not safe for production)")

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '').split(',')
ALLOWED_HOSTS = [host.strip() for host in ALLOWED_HOSTS if host.strip()]

# Allow all hosts if none configured (fallback)
if not ALLOWED_HOSTS:
    ALLOWED_HOSTS = ['*']


# Database - PostgreSQL over TCP, SQLite only as a build-time fallback
DB_HOST = os.environ.get('DB_HOST', '')

if DB_HOST:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DB_NAME', 'stock_watchlist'),
            'USER': os.environ.get('DB_USER', 'watchlist'),
            'PASSWORD': os.environ.get('DB_PASSWORD', ''),
            'HOST': DB_HOST,
            'PORT': os.environ.get('DB_PORT', '5432'),
        }
    }
else:
    # Build-time fallback - use SQLite (for collectstatic during Docker build)
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }


# Shared cache so invalidation reaches every worker
REDIS_URL = os.environ.get('REDIS_URL', '')
if REDIS_URL:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.redis.RedisCache',
            'LOCATION': REDIS_URL,
        }
    }


# CORS - Production origins
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('CORS_ALLOWED_ORIGINS', '').split(',')
    if origin.strip()
]
CORS_ALLOW_ALL_ORIGINS = False


# Security settings for production
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

CSRF_TRUSTED_ORIGINS = list(CORS_ALLOWED_ORIGINS)


# Static files
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}


# Logging for production
LOGGING['root']['level'] = 'INFO'
LOGGING['loggers']['django']['level'] = 'WARNING'
LOGGING['loggers']['watchlist_api']['level'] = 'INFO'

print("🚀 Running with PRODUCTION settings")
