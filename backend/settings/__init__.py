"""Settings for the Stock Watchlist project.

Pick one module explicitly through ``DJANGO_SETTINGS_MODULE``:

- ``backend.settings.development``: SQLite, local-memory cache, debug on
- ``backend.settings.production``: PostgreSQL, Redis cache when configured
- ``backend.settings.test``: in-memory SQLite for the pytest suite
"""
