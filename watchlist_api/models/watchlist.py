"""Watchlist models for user-specific stock tracking."""

from django.db import models
from django.utils import timezone


class WatchlistEntry(models.Model):
    """A symbol tracked by one user.

    Rows are keyed by the resolved user identifier rather than a foreign key,
    so identities issued by an external provider can own entries too.
    """

    user_id = models.CharField(max_length=64, db_index=True)
    symbol = models.CharField(max_length=20)
    company = models.CharField(max_length=255, blank=True)
    added_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = 'watchlist_entries'
        constraints = [
            models.UniqueConstraint(
                fields=['user_id', 'symbol'],
                name='unique_watchlist_user_symbol',
            ),
        ]
        ordering = ['symbol']
        verbose_name_plural = 'watchlist entries'

    def __str__(self):
        return f"{self.user_id}: {self.symbol}"
