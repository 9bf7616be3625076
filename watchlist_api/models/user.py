"""Accounts that own watchlists."""

from django.db import models
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin


class UserManager(BaseUserManager):
    """Email is the login name; there is no username."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Users must have an email address')

        user = self.model(email=self.normalize_email(email), **extra_fields)
        if password:
            user.set_password(password)
        else:
            # Accounts from an external identity provider sign in there
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('email_verified', True)

        if not (extra_fields['is_staff'] and extra_fields['is_superuser']):
            raise ValueError('Superuser must have is_staff=True and is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """An account, keyed by email.

    Watchlist entries are not linked by foreign key. They are stored under
    ``watchlist_owner_id``, which is the identity provider's ``external_id``
    when the account has one and the primary key otherwise.
    """

    LOCAL = 'local'
    EXTERNAL = 'external'
    AUTH_PROVIDER_CHOICES = [
        (LOCAL, 'Email/Password'),
        (EXTERNAL, 'External Provider'),
    ]

    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255, blank=True)
    external_id = models.CharField(max_length=64, blank=True, default='')
    auth_provider = models.CharField(max_length=50, choices=AUTH_PROVIDER_CHOICES, default=LOCAL)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    email_verified = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        verbose_name = 'user'
        verbose_name_plural = 'users'

    def __str__(self):
        return self.email

    @property
    def watchlist_owner_id(self) -> str:
        return self.external_id or str(self.pk)

    def get_full_name(self):
        return self.name or self.email

    def get_short_name(self):
        return self.name or self.email.split('@')[0]
