"""
URL configuration for the CommunityHelp project.

All account endpoints live in the ``users`` app and are mounted under
``api/``.  Needs are created elsewhere on the platform, so the ``needs``
app exposes no routes of its own.
"""

from django.urls import path, include

urlpatterns = [
    path("api/", include("users.urls")),
]
