"""
Persistence access for user records.

``UserRepository`` is the only place that talks to the ORM for users.
Uniqueness of email and reset token is left to the database's unique
indexes; a violated index surfaces as ``EmailAlreadyExists``.  Writes to
an existing row are guarded by the ``version`` column so that a caller
holding an outdated copy fails with ``StaleUserRecord`` instead of
overwriting a newer write.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from needs.models import Need, SavedNeed
from .exceptions import ConflictingUserRecord, EmailAlreadyExists, StaleUserRecord
from .models import User

logger = logging.getLogger(__name__)

_UNVERSIONED_FIELDS = {"id", "version", "created_at", "updated_at"}


class UserRepository:
    """ORM-backed credential store."""

    def find_by_email(self, email: str) -> Optional[User]:
        return User.objects.filter(email=email).first()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return User.objects.filter(pk=user_id).first()

    def find_by_reset_token(self, token: Optional[str]) -> Optional[User]:
        # A None filter would match every user without a token
        if not token:
            return None
        return User.objects.filter(reset_password_token=token).first()

    def save(self, user: User) -> User:
        """Insert or update ``user`` atomically.

        Raises ``EmailAlreadyExists`` when another user holds the email,
        ``ConflictingUserRecord`` when any other unique index rejects the
        write and ``StaleUserRecord`` when the row's version moved on.
        """
        try:
            with transaction.atomic():
                if user.pk is None:
                    user.save(force_insert=True)
                    return user
                now = timezone.now()
                fields = {
                    field.attname: getattr(user, field.attname)
                    for field in User._meta.concrete_fields
                    if field.attname not in _UNVERSIONED_FIELDS
                }
                updated = User.objects.filter(pk=user.pk, version=user.version).update(
                    version=F("version") + 1, updated_at=now, **fields
                )
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected write for user %s: %s", user.pk, exc)
            if self._email_taken_by_other(user):
                raise EmailAlreadyExists(f"Email {user.email} already used") from exc
            raise ConflictingUserRecord(
                "User record conflicts with an existing user. Please retry"
            ) from exc
        if not updated:
            raise StaleUserRecord(
                f"User {user.pk} was modified by another request. Please retry"
            )
        user.version += 1
        user.updated_at = now
        return user

    def _email_taken_by_other(self, user: User) -> bool:
        others = User.objects.filter(email=user.email)
        if user.pk is not None:
            others = others.exclude(pk=user.pk)
        return others.exists()

    def add_saved_need(self, user: User, need: Need) -> SavedNeed:
        return SavedNeed.objects.create(user=user, need=need)

    def saved_needs(self, user: User) -> List[Need]:
        saved = SavedNeed.objects.filter(user=user).select_related("need").order_by("id")
        return [entry.need for entry in saved]

    def owned_needs(self, user: User) -> List[Need]:
        return list(Need.objects.filter(owner=user).order_by("id"))
