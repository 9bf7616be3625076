"""
Test settings for the Stock Watchlist project.
"""

from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ALLOWED_HOSTS = ['testserver', 'localhost']

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'stock-watchlist-tests',
    }
}

# Fast hashing keeps user fixtures cheap
PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

MARKET_DATA = dict(MARKET_DATA, FINNHUB_API_KEY='test-finnhub-key')

LOGGING['loggers']['watchlist_api']['level'] = 'WARNING'
