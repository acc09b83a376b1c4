"""
Service classes for the users app.

``AccountService`` orchestrates every account operation: registration,
profile, email and password updates, the password reset flow and the
user's saved and owned needs.  Persistence, hashing and mail delivery
are injected (Dependency Inversion) so views only ever talk to the
service, and tests can swap any collaborator.

Reset flow: a user starts without a token, ``request_password_reset``
issues one (replacing any earlier token) and ``complete_reset`` clears
it, so each token can be used once.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import List, Optional

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password

from needs.models import Need
from needs.repositories import NeedRepository
from notifications.services import MailObserver, notification_subject
from .exceptions import (
    EmailAlreadyExists,
    IncorrectOldPassword,
    InvalidCredentials,
    InvalidToken,
    NeedNotFound,
    UserNotFound,
)
from .models import User
from .repositories import UserRepository

logger = logging.getLogger(__name__)

RESET_SUBJECT = "FORGOT YOUR PASSWORD"
PASSWORD_CHANGED_MESSAGE = "Password change successfully"


class PasswordHasher(ABC):
    """Abstract base class for one-way password hashing."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Return an opaque hash of ``plaintext``."""

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return whether ``plaintext`` matches ``hashed``."""


class DjangoPasswordHasher(PasswordHasher):
    """Hasher backed by Django's ``PASSWORD_HASHERS`` setting."""

    def hash(self, plaintext: str) -> str:
        return make_password(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not hashed:
            return False
        return check_password(plaintext, hashed)


@dataclass(frozen=True)
class UserProfile:
    """Public projection of a user, safe to return to clients."""

    id: int
    email: str
    name: str
    phone_number: Optional[str]
    image_url: Optional[str]
    bio: Optional[str]
    is_helper: bool

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.pk,
            email=user.email,
            name=user.name,
            phone_number=user.phone_number,
            image_url=user.image_url,
            bio=user.bio,
            is_helper=user.is_helper,
        )

    def as_dict(self) -> dict:
        return asdict(self)


class AccountService:
    """Account use cases for the authenticated caller.

    ``identity`` arguments are the caller's email as established by the
    login session.
    """

    def __init__(
        self,
        users: Optional[UserRepository] = None,
        needs: Optional[NeedRepository] = None,
        hasher: Optional[PasswordHasher] = None,
        notifier: Optional[MailObserver] = None,
    ) -> None:
        self.users = users or UserRepository()
        self.needs = needs or NeedRepository()
        self.hasher = hasher or DjangoPasswordHasher()
        self.notifier = notifier or notification_subject

    # -- lookups -----------------------------------------------------------

    def get_current_user(self, identity: str) -> User:
        user = self.users.find_by_email(identity)
        if user is None:
            # The session vouched for this email, so a miss means the record vanished
            logger.error("Authenticated caller %s has no user record", identity)
            raise UserNotFound(f"User not found with email {identity}")
        return user

    def get_current_profile(self, identity: str) -> UserProfile:
        return UserProfile.from_user(self.get_current_user(identity))

    # -- registration and credentials -------------------------------------

    def register(self, email: str, name: str, password: str, is_helper: bool = False) -> None:
        user = User(
            email=email,
            name=name,
            is_helper=is_helper,
            image_url=settings.DEFAULT_AVATAR_URL,
            provider=User.Provider.LOCAL,
            password=self.hasher.hash(password),
        )
        user.add_role(User.ROLE_USER)
        try:
            self.users.save(user)
        except EmailAlreadyExists as exc:
            logger.error("Error during registration. %s", exc)
            raise EmailAlreadyExists(
                f"The user with email {email} already exist. Please check credentials"
            ) from exc
        logger.info("Saving User %s", email)

    def authenticate(self, email: str, password: str) -> User:
        user = self.users.find_by_email(email)
        if user is None or not self.hasher.verify(password, user.password):
            raise InvalidCredentials("Invalid email or password")
        return user

    # -- profile updates ---------------------------------------------------

    def update_profile(
        self,
        image_url: Optional[str],
        bio: Optional[str],
        phone_number: Optional[str],
        name: str,
        identity: str,
    ) -> User:
        """Overwrite all profile fields; omitted values are stored as given."""
        user = self.get_current_user(identity)
        user.image_url = image_url
        user.bio = bio
        user.phone_number = phone_number
        user.name = name
        return self.users.save(user)

    def update_email(self, new_email: str, identity: str) -> str:
        user = self.get_current_user(identity)
        if new_email == user.email:
            raise EmailAlreadyExists("Email already used")
        old_email = user.email
        user.email = new_email
        try:
            self.users.save(user)
        except EmailAlreadyExists as exc:
            user.email = old_email
            raise EmailAlreadyExists("Email already used") from exc
        logger.info("User %s changed email to %s", user.pk, new_email)
        return new_email

    def update_password(self, old_password: str, new_password: str, identity: str) -> str:
        user = self.get_current_user(identity)
        if not self.hasher.verify(old_password, user.password):
            raise IncorrectOldPassword("Old password is incorrect")
        user.password = self.hasher.hash(new_password)
        self.users.save(user)
        return PASSWORD_CHANGED_MESSAGE

    # -- password reset ----------------------------------------------------

    def request_password_reset(self, email: str) -> str:
        user = self.users.find_by_email(email)
        if user is None:
            logger.error("User with email:%s not found", email)
            raise UserNotFound(f"User with email: {email} not found")
        token = str(uuid.uuid4())
        user.reset_password_token = token
        self.users.save(user)
        logger.info("Issued password reset token for user %s", user.pk)
        message = (
            f"Hello, {user.name}! \n"
            f"Welcome to Community Help. Please, visit next link: "
            f"{settings.PASSWORD_RESET_URL}?token={token}"
        )
        self.notifier.send(email, RESET_SUBJECT, message)
        return token

    def resolve_by_reset_token(self, token: str) -> User:
        user = self.users.find_by_reset_token(token)
        if user is None:
            raise InvalidToken(f"User with token: {token} not found")
        return user

    def complete_reset(self, user: User, new_password: str) -> None:
        user.password = self.hasher.hash(new_password)
        user.reset_password_token = None
        self.users.save(user)
        logger.info("Password reset completed for user %s", user.pk)

    def reset_password(self, token: str, new_password: str) -> None:
        self.complete_reset(self.resolve_by_reset_token(token), new_password)

    # -- needs -------------------------------------------------------------

    def save_need(self, need_id: int, identity: str) -> None:
        """Append a need to the caller's saved list.

        Repeated calls with the same need add repeated entries.
        """
        need = self.needs.find_by_id(need_id)
        if need is None:
            raise NeedNotFound("Need not found")
        user = self.get_current_user(identity)
        self.users.add_saved_need(user, need)

    def list_saved_needs(self, identity: str) -> List[Need]:
        return self.users.saved_needs(self.get_current_user(identity))

    def list_owned_needs(self, identity: str) -> List[Need]:
        return self.users.owned_needs(self.get_current_user(identity))
