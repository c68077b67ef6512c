"""Credential source interface.

The transport asks a CredentialProvider for a bearer token once per call,
at initiation.  Providers are owned by the application; the transport only
reads from them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    @abstractmethod
    def get_token(self) -> str | None:
        """Return the current bearer token, or None when unauthenticated."""
