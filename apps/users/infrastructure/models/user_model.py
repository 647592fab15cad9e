"""
User Django ORM model.
"""
import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models


class UserType(models.TextChoices):
    CONSUMER = 'consumer', 'Consumer'
    PRODUCER = 'producer', 'Producer'


class UserModel(AbstractUser):
    """Marketplace account; either buys produce or sells it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    user_type = models.CharField(
        max_length=20,
        choices=UserType.choices,
        default=UserType.CONSUMER,
        db_index=True,
    )
    phone = models.CharField(max_length=20, blank=True)
    location = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'

    def __str__(self):
        return self.email

    @property
    def is_producer(self) -> bool:
        return self.user_type == UserType.PRODUCER

    @property
    def display_name(self) -> str:
        return self.get_full_name() or self.username
