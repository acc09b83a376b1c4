from django.db import models


class User(models.Model):
    """Account record for the community help platform.

    Authentication is handled by the ``users`` app itself via session
    state, not via Django's built-in auth system.  ``is_helper``
    distinguishes people offering help from people asking for it.

    ``reset_password_token`` holds at most one outstanding reset token;
    issuing a new one replaces the old.  ``version`` is bumped on every
    write by ``UserRepository.save``.
    """

    class Provider(models.TextChoices):
        LOCAL = "local", "Local"
        GOOGLE = "google", "Google"
        FACEBOOK = "facebook", "Facebook"
        GITHUB = "github", "GitHub"

    ROLE_USER = "USER"
    ROLE_ADMIN = "ADMIN"

    email = models.EmailField(unique=True)
    password = models.CharField(max_length=128)
    name = models.CharField(max_length=100)
    bio = models.TextField(blank=True, null=True)
    phone_number = models.CharField(max_length=30, blank=True, null=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    is_helper = models.BooleanField(default=False)
    roles = models.JSONField(default=list)
    provider = models.CharField(max_length=20, choices=Provider.choices, default=Provider.LOCAL)
    reset_password_token = models.CharField(max_length=64, unique=True, blank=True, null=True)
    version = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def add_role(self, role: str) -> None:
        """Add ``role`` keeping the stored list unique and sorted."""
        self.roles = sorted(set(self.roles) | {role})

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def __str__(self) -> str:
        return self.email
