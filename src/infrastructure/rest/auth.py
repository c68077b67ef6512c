"""Session flow against the origin's auth endpoints.

    login          POST auth/login without a bearer; stores token, role, linkedDoctorId
    logout         forgets the session (optionally POST auth/logout first)
    refresh        POST auth/refresh; replaces the token, keeps role
    check_auth     AuthError unless a token is stored
    check_error    clears the session and raises AuthError on 401 / 403
    get_permissions / get_linked_doctor_id

A session left idle for idle_timeout_s is forgotten.  Every successful
login or refresh, and every touch(), restarts the idle timer.
"""

from __future__ import annotations

import asyncio
import logging

from src.domain.errors import ApiError, AuthError, HttpStatusError, InvalidResponseError
from src.domain.models.queries import RequestOptions
from src.infrastructure.http.client import HttpClient
from src.infrastructure.http.credentials import TokenStore

from .endpoints import Resource

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT_S = 60 * 60


class AuthService:
    def __init__(
        self,
        client: HttpClient,
        store: TokenStore,
        idle_timeout_s: float | None = DEFAULT_IDLE_TIMEOUT_S,
    ) -> None:
        self._client = client
        self._store = store
        self._idle_timeout_s = idle_timeout_s
        self._idle_handle: asyncio.TimerHandle | None = None

    # --- idle timer ---

    def touch(self) -> None:
        """Restart the idle timer.  Must be called from the running event loop."""
        self._cancel_idle()
        if self._idle_timeout_s is None or self._store.get_token() is None:
            return
        loop = asyncio.get_running_loop()
        self._idle_handle = loop.call_later(self._idle_timeout_s, self._expire)

    def _cancel_idle(self) -> None:
        if self._idle_handle is not None:
            self._idle_handle.cancel()
            self._idle_handle = None

    def _expire(self) -> None:
        self._idle_handle = None
        logger.info("Session idle for %s s; logging out", self._idle_timeout_s)
        self._store.clear()

    # --- session ---

    async def login(self, username: str, password: str) -> None:
        """Authenticate and store the session.

        Raises AuthError("Login failed") when the origin refuses, and
        InvalidResponseError when it answers without a token.
        """
        try:
            body = await self._client.post(
                Resource.AUTH_LOGIN.value,
                {"username": username, "password": password},
                RequestOptions(skip_auth=True),
            )
        except HttpStatusError as e:
            raise AuthError("Login failed", status=e.status, data=e.data) from e

        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise InvalidResponseError("Login response has no token", data=body)
        self._store.set_session(token, body.get("role"), body.get("linkedDoctorId"))
        logger.info("Logged in as %s (role %s)", username, self._store.role)
        self.touch()

    async def logout(self, revoke: bool = False) -> None:
        """Forget the session.

        With revoke=True the origin is told first; the local session is
        cleared even when that call fails, and the failure is raised.
        """
        self._cancel_idle()
        try:
            if revoke and self._store.get_token():
                await self._client.post(Resource.AUTH_LOGOUT.value)
        finally:
            self._store.clear()

    async def refresh(self) -> str:
        self.check_auth()
        body = await self._client.post(Resource.AUTH_REFRESH.value)
        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise InvalidResponseError("Refresh response has no token", data=body)
        self._store.set(token)
        self.touch()
        return token

    # --- checks ---

    def check_auth(self) -> None:
        if not self._store.get_token():
            raise AuthError("User not authenticated")

    def check_error(self, error: ApiError) -> None:
        """Clear the session when error is an auth refusal; otherwise do nothing."""
        if error.status not in (401, 403):
            return
        logger.warning("Origin refused credentials (%s); clearing session", error.status)
        self._cancel_idle()
        self._store.clear()
        raise AuthError("Unauthorized", status=error.status, data=error.data) from error

    def get_permissions(self) -> str:
        role = self._store.role
        if not role:
            raise AuthError("Role not found")
        return role

    def get_linked_doctor_id(self) -> str:
        linked_doctor_id = self._store.linked_doctor_id
        if not linked_doctor_id:
            raise AuthError("Linked doctor ID not found")
        return linked_doctor_id
