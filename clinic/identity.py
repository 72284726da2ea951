"""
Caller identity.

The hosting runtime (DRF authentication) verifies the caller; this module
only turns the verified user into an opaque :class:`Principal`.  Services
never derive or guess an identity themselves: they receive an
:class:`IdentityContext` built once per call.
"""
from __future__ import annotations

from dataclasses import dataclass

from rest_framework.exceptions import NotAuthenticated


@dataclass(frozen=True)
class Principal:
    """Opaque caller token compared by normalised text."""
    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, 'text', str(self.text).strip())

    def __str__(self) -> str:
        return self.text


class IdentityContext:
    """Supplies the caller principal for the current call."""

    def __init__(self, principal: Principal):
        self._principal = principal

    @property
    def principal(self) -> Principal:
        return self._principal

    def owns(self, owner: str) -> bool:
        return Principal(owner) == self._principal

    @classmethod
    def for_principal(cls, text: str) -> 'IdentityContext':
        return cls(Principal(text))

    @classmethod
    def from_request(cls, request) -> 'IdentityContext':
        user = getattr(request, 'user', None)
        if not (user and user.is_authenticated):
            raise NotAuthenticated()
        return cls(Principal(user.get_username()))

    def __repr__(self) -> str:
        return f"IdentityContext({self._principal.text!r})"
