"""Accounts, roles and access control for the marketplace.

Holds the email-login user model (``AUTH_USER_MODEL``), the authorization
policy shared by every app, JWT authentication with token revocation and
the auth/users endpoints.
"""
