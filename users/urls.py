"""
URL patterns for the users app.

Mounted under ``api/`` by the project's root URL configuration.
"""

from django.urls import path

from . import views


urlpatterns = [
    path("auth/csrf/", views.CsrfTokenView.as_view(), name="csrf_token"),
    path("auth/signup/", views.SignupView.as_view(), name="signup"),
    path("auth/login/", views.LoginView.as_view(), name="login"),
    path("auth/logout/", views.LogoutView.as_view(), name="logout"),
    path("auth/forgot-password/", views.ForgotPasswordView.as_view(), name="forgot_password"),
    path("auth/reset-password/", views.ResetPasswordView.as_view(), name="reset_password"),
    path("user/", views.CurrentUserView.as_view(), name="current_user"),
    path("user/update/", views.UpdateProfileView.as_view(), name="update_profile"),
    path("user/update/email/", views.UpdateEmailView.as_view(), name="update_email"),
    path("user/update/password/", views.UpdatePasswordView.as_view(), name="update_password"),
    path("user/needs/", views.OwnedNeedListView.as_view(), name="owned_needs"),
    path("user/needs/saved/", views.SavedNeedListView.as_view(), name="saved_needs"),
    path(
        "user/needs/saved/<int:need_id>/", views.SaveNeedView.as_view(), name="save_need"
    ),
]
