"""
JSON views for account management.

Every view is a thin adapter: it validates the request with a form from
``forms.py``, calls ``AccountService`` and serialises the result.  The
caller's identity is the email stored in the session by ``LoginView``.
Account errors raised by the service propagate to
``AccountErrorMiddleware``, which answers 400 with the error message.

Clients fetch ``auth/csrf/`` once to receive the ``csrftoken`` cookie and
send its value back in the ``X-CSRFToken`` header on every POST.  The
session also keeps a fingerprint of the password hash, so changing or
resetting the password logs out every other session of that user.
"""

from __future__ import annotations

from typing import Iterable

from django.http import JsonResponse
from django.middleware.csrf import get_token, rotate_token
from django.utils.crypto import constant_time_compare, salted_hmac
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.generic import View

from needs.models import Need
from .forms import (
    ForgotPasswordForm,
    LoginForm,
    ResetPasswordForm,
    SignupForm,
    UpdateEmailForm,
    UpdatePasswordForm,
    UpdateProfileForm,
)
from .models import User
from .services import AccountService, UserProfile

SESSION_KEY = "user_email"
SESSION_HASH_KEY = "user_password_hash"

account_service = AccountService()


def _invalid(form) -> JsonResponse:
    return JsonResponse({"errors": form.errors.get_json_data()}, status=400)


def session_hash(user: User) -> str:
    """Fingerprint of the stored password hash kept in the session."""
    return salted_hmac("users.views.session_hash", user.password).hexdigest()


def _start_session(request, user: User) -> None:
    request.session[SESSION_KEY] = user.email
    request.session[SESSION_HASH_KEY] = session_hash(user)


def _needs_payload(needs: Iterable[Need]) -> list:
    return [
        {
            "id": need.pk,
            "title": need.title,
            "description": need.description,
            "owner_id": need.owner_id,
        }
        for need in needs
    ]


class AuthenticatedView(View):
    """Base view that rejects requests without a logged-in user."""

    def dispatch(self, request, *args, **kwargs):  # type: ignore[override]
        if SESSION_KEY not in request.session:
            return JsonResponse({"detail": "Authentication required"}, status=401)
        user = account_service.users.find_by_email(request.session[SESSION_KEY])
        if user is not None and not constant_time_compare(
            request.session.get(SESSION_HASH_KEY, ""), session_hash(user)
        ):
            # Password changed since this session logged in
            request.session.flush()
            return JsonResponse({"detail": "Session expired"}, status=401)
        return super().dispatch(request, *args, **kwargs)

    @property
    def identity(self) -> str:
        return self.request.session[SESSION_KEY]


@method_decorator(ensure_csrf_cookie, name="dispatch")
class CsrfTokenView(View):
    """Set the CSRF cookie and echo the token for the X-CSRFToken header."""

    def get(self, request, *args, **kwargs):  # type: ignore[override]
        return JsonResponse({"csrfToken": get_token(request)})


class SignupView(View):
    """Register a new local account."""

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = SignupForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        account_service.register(
            email=form.cleaned_data["email"],
            name=form.cleaned_data["name"],
            password=form.cleaned_data["password"],
            is_helper=form.cleaned_data["is_helper"],
        )
        return JsonResponse({"message": "User registered successfully"}, status=201)


class LoginView(View):
    """Check credentials and remember the caller's email in the session."""

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = LoginForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        user = account_service.authenticate(
            form.cleaned_data["email"], form.cleaned_data["password"]
        )
        request.session.cycle_key()
        rotate_token(request)
        _start_session(request, user)
        return JsonResponse(UserProfile.from_user(user).as_dict())


class LogoutView(View):
    def post(self, request, *args, **kwargs):  # type: ignore[override]
        request.session.flush()
        return JsonResponse({"message": "Logged out"})


class CurrentUserView(AuthenticatedView):
    def get(self, request, *args, **kwargs):  # type: ignore[override]
        return JsonResponse(account_service.get_current_profile(self.identity).as_dict())


class UpdateProfileView(AuthenticatedView):
    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = UpdateProfileForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        user = account_service.update_profile(
            image_url=form.cleaned_data["image_url"],
            bio=form.cleaned_data["bio"],
            phone_number=form.cleaned_data["phone_number"],
            name=form.cleaned_data["name"],
            identity=self.identity,
        )
        return JsonResponse(UserProfile.from_user(user).as_dict())


class UpdateEmailView(AuthenticatedView):
    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = UpdateEmailForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        email = account_service.update_email(form.cleaned_data["email"], self.identity)
        # The session identity must follow the new address
        request.session[SESSION_KEY] = email
        return JsonResponse({"email": email})


class UpdatePasswordView(AuthenticatedView):
    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = UpdatePasswordForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        message = account_service.update_password(
            form.cleaned_data["old_password"],
            form.cleaned_data["new_password"],
            self.identity,
        )
        _start_session(request, account_service.get_current_user(self.identity))
        return JsonResponse({"message": message})


class ForgotPasswordView(View):
    """Email a password reset link to the given address."""

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = ForgotPasswordForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        account_service.request_password_reset(form.cleaned_data["email"])
        return JsonResponse({"message": "Reset password link has been sent to your email"})


class ResetPasswordView(View):
    """Check a reset token (GET) or use it to set a new password (POST)."""

    def get(self, request, *args, **kwargs):  # type: ignore[override]
        user = account_service.resolve_by_reset_token(request.GET.get("token", ""))
        return JsonResponse({"email": user.email})

    def post(self, request, *args, **kwargs):  # type: ignore[override]
        form = ResetPasswordForm(request.POST)
        if not form.is_valid():
            return _invalid(form)
        account_service.reset_password(
            form.cleaned_data["token"], form.cleaned_data["password"]
        )
        return JsonResponse({"message": "You have successfully changed your password"})


class SaveNeedView(AuthenticatedView):
    def post(self, request, need_id: int, *args, **kwargs):  # type: ignore[override]
        account_service.save_need(need_id, self.identity)
        return JsonResponse({"message": "Need saved"}, status=201)


class SavedNeedListView(AuthenticatedView):
    def get(self, request, *args, **kwargs):  # type: ignore[override]
        return JsonResponse(
            {"needs": _needs_payload(account_service.list_saved_needs(self.identity))}
        )


class OwnedNeedListView(AuthenticatedView):
    def get(self, request, *args, **kwargs):  # type: ignore[override]
        return JsonResponse(
            {"needs": _needs_payload(account_service.list_owned_needs(self.identity))}
        )
