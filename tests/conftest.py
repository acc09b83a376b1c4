"""
Pytest configuration and shared fixtures for the account tests.
"""

from typing import List, Tuple

import pytest

from needs.models import Need
from notifications.services import MailObserver
from users.models import User
from users.services import AccountService


class RecordingNotifier(MailObserver):
    """Collects messages instead of delivering them."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str, str]] = []

    def send(self, to_address: str, subject: str, body: str) -> None:
        self.sent.append((to_address, subject, body))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def service(notifier: RecordingNotifier) -> AccountService:
    """Account service wired to the test database and a recording notifier."""
    return AccountService(notifier=notifier)


@pytest.fixture
def alice(db, service: AccountService) -> User:
    service.register("alice@example.com", "Alice", "AlicePass123", is_helper=False)
    return User.objects.get(email="alice@example.com")


@pytest.fixture
def bob(db, service: AccountService) -> User:
    service.register("bob@example.com", "Bob", "BobPass123", is_helper=True)
    return User.objects.get(email="bob@example.com")


@pytest.fixture
def need(bob: User) -> Need:
    return Need.objects.create(title="Groceries", description="Weekly shopping", owner=bob)
