"""CredentialProvider implementations."""

from __future__ import annotations

from src.domain.credentials import CredentialProvider


class StaticCredentialProvider(CredentialProvider):
    """Always returns the token it was built with."""

    def __init__(self, token: str | None) -> None:
        self._token = token or None

    def get_token(self) -> str | None:
        return self._token


class TokenStore(CredentialProvider):
    """Mutable session holder owned by the application.

    Holds the bearer token plus the role and linked doctor id the origin
    returns at login.  AuthService writes it; the transport only reads the
    token.  A refresh that happens mid-request is seen by the next call, not
    the one in flight.
    """

    def __init__(
        self,
        token: str | None = None,
        role: str | None = None,
        linked_doctor_id: str | None = None,
    ) -> None:
        self._token = token or None
        self._role = role or None
        self._linked_doctor_id = linked_doctor_id or None

    @property
    def role(self) -> str | None:
        return self._role

    @property
    def linked_doctor_id(self) -> str | None:
        return self._linked_doctor_id

    def set(self, token: str | None) -> None:
        """Replace the token only; role and linked doctor are kept."""
        self._token = token or None

    def set_session(
        self,
        token: str | None,
        role: str | None = None,
        linked_doctor_id: str | None = None,
    ) -> None:
        self._token = token or None
        self._role = role or None
        self._linked_doctor_id = linked_doctor_id or None

    def clear(self) -> None:
        self._token = None
        self._role = None
        self._linked_doctor_id = None

    def get_token(self) -> str | None:
        return self._token
