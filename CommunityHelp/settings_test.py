"""
Test-specific Django settings.

This module extends the base settings with test-specific configurations:
- In-memory SQLite database
- Local-memory mail backend so tests can inspect ``mail.outbox``
- Fast password hashing
- Simplified logging
"""

from CommunityHelp.settings import *  # noqa: F403

# =============================================================================
# Test Database Configuration
# =============================================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# =============================================================================
# Password Hashing (Faster for Tests)
# =============================================================================

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# =============================================================================
# Email Configuration (Local Memory Backend for Tests)
# =============================================================================

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
DEFAULT_FROM_EMAIL = "noreply@example.com"

# =============================================================================
# Accounts
# =============================================================================

DEFAULT_AVATAR_URL = "https://example.com/avatar.png"
PASSWORD_RESET_URL = "http://testserver/forget/reset_password"

# =============================================================================
# Logging Configuration (Simplified for Tests)
# =============================================================================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "django.db.backends": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}

# =============================================================================
# Security Settings (Relaxed for Tests)
# =============================================================================

SECRET_KEY = "test-secret-key-not-for-production"  # nosec B105 - Test environment only
DEBUG = False
ALLOWED_HOSTS = ["*"]
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
