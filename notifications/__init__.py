"""Notifications application package.

This app delivers outbound messages (such as password reset links)
using the Observer pattern.  See ``notifications.services``.
"""
