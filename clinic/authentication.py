"""
Token authentication for callers of the record API.

Authentication only verifies who is calling; the verified username
becomes the caller :class:`~clinic.identity.Principal`.  Tokens are
issued out of band (see the ``ensure_callers`` management command).
"""
from __future__ import annotations

from rest_framework import authentication


class TokenAuthentication(authentication.TokenAuthentication):
    """DRF token authentication using the ``Token`` keyword.

    Kept as a project-local class so settings have a stable import path
    and the keyword can change without touching configuration.
    """

    keyword = 'Token'
