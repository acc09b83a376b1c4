"""Users application package for the community help account backend.

This package contains the user model, the account service, its
persistence layer and the JSON views for registration, profile
management, password reset and saved needs.
"""
