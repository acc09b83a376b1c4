"""Needs application package.

Holds the ``Need`` model and the ``SavedNeed`` bookmarks users keep.
Needs are created elsewhere on the platform; this app only exposes
read access through ``NeedRepository``.
"""
