from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import secrets
import string
import uuid


PUBLIC_ID_LENGTH = 6
PUBLIC_ID_ALPHABET = string.ascii_uppercase + string.digits


class Role(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    CENTRE_STAFF = 'centre_staff', 'Centre Staff'
    RECYCLER = 'recycler', 'Recycler'


def generate_public_id():
    """Return a random member code such as ``K7Q2XD``."""
    return ''.join(secrets.choice(PUBLIC_ID_ALPHABET) for _ in range(PUBLIC_ID_LENGTH))


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Profile of anyone using the system: recyclers, centre staff and admins.

    The point balance is not stored here; it is always derived from the
    points ledger (see ``apps.rewards.services.ledger.get_balance``).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    full_name = models.CharField(max_length=150, blank=True)

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.RECYCLER,
        db_index=True
    )

    # Member code shown to recyclers and typed in by centre staff
    public_id = models.CharField(
        max_length=PUBLIC_ID_LENGTH,
        unique=True,
        editable=False
    )

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'profiles'
        indexes = [
            models.Index(fields=['role', 'created_at'], name='profiles_role_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.get_display_name()} ({self.public_id})"

    def save(self, *args, **kwargs):
        """Assign a member code on first save."""
        if not self.public_id:
            self.public_id = self._generate_unique_public_id()
        super().save(*args, **kwargs)

    @classmethod
    def _generate_unique_public_id(cls, attempts=10):
        for _ in range(attempts):
            candidate = generate_public_id()
            if not cls.objects.filter(public_id=candidate).exists():
                return candidate
        raise RuntimeError('Could not generate a unique member code')

    def get_display_name(self):
        """Return full name or email prefix."""
        return self.full_name or self.email.split('@')[0]

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @property
    def is_centre_staff(self):
        return self.role == Role.CENTRE_STAFF

    @property
    def is_recycler(self):
        return self.role == Role.RECYCLER
