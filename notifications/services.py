"""
Observer pattern implementation for outbound notifications.

This module defines a ``NotificationSubject`` that maintains a list of
``MailObserver`` objects.  When the account service needs to reach a
user (e.g. a password reset was requested), the subject forwards the
message to every observer by calling its ``send`` method.  The concrete
observer ``EmailObserver`` delivers the message through Django's mail
framework.  Additional observers (e.g. SMS) can be registered without
changing the account service.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


class MailObserver(ABC):
    """Interface for observers that deliver a message to an address."""

    @abstractmethod
    def send(self, to_address: str, subject: str, body: str) -> None:
        """Deliver ``body`` with ``subject`` to ``to_address``."""


class EmailObserver(MailObserver):
    """Observer that sends the message as an email."""

    def send(self, to_address: str, subject: str, body: str) -> None:
        send_mail(
            subject,
            body,
            settings.DEFAULT_FROM_EMAIL,
            [to_address],
            fail_silently=False,
        )
        logger.info("Sent mail '%s' to %s", subject, to_address)


class NotificationSubject(MailObserver):
    """Subject that manages mail observers.

    The subject is itself a ``MailObserver`` so callers depend only on
    ``send`` and never on how many observers are registered.
    """

    def __init__(self) -> None:
        self._observers: List[MailObserver] = []

    def register(self, observer: MailObserver) -> None:
        """Register an observer to receive messages."""
        self._observers.append(observer)

    def unregister(self, observer: MailObserver) -> None:
        """Remove an observer from the list."""
        self._observers.remove(observer)

    def send(self, to_address: str, subject: str, body: str) -> None:
        """Forward the message to all observers."""
        for observer in self._observers:
            observer.send(to_address, subject, body)


# Global subject instance used by the application
notification_subject = NotificationSubject()
# Deliver by email by default
notification_subject.register(EmailObserver())
