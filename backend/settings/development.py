"""
Development settings: local SQLite file, any host, any CORS origin.
"""

from .base import *

DEBUG = True

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'watchlist.sqlite3',
    }
}

ALLOWED_HOSTS = ['*']
CORS_ALLOW_ALL_ORIGINS = True

# shell_plus and runserver_plus
INSTALLED_APPS += ['django_extensions']

LOGGING['root']['level'] = 'DEBUG'

if not MARKET_DATA['FINNHUB_API_KEY']:
    print("⚠️  FINNHUB_API_KEY is not set; the watchlist page will show a configuration error")

print("🔧 Running with DEVELOPMENT settings")
