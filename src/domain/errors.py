"""Error taxonomy for origin calls.

Every failure surfaced by the transport, the CRUD adapter or the auth flow
is an ApiError:

    ApiError
    ├── RequestTimeoutError   deadline exceeded; message "Request timeout", no status
    ├── NetworkError          transport-level failure (DNS, refused connection)
    ├── InvalidResponseError  body could not be decoded or normalized
    ├── AuthError             login refused, or no session / role / linked doctor stored
    └── HttpStatusError       non-2xx response; carries status and parsed payload
        ├── NotFoundError     404, and any other get_one failure
        ├── UnauthorizedError 401 / 403
        └── RecordAccessDeniedError (NotFoundError, UnauthorizedError)
                              get_one refused with 401 / 403

Nothing here is retried; errors are raised to the call site that failed.
"""

from __future__ import annotations

from typing import Any

REQUEST_TIMEOUT_MESSAGE = "Request timeout"


class ApiError(Exception):
    """Base class for failed origin calls.

    status is the HTTP status when a response was received, else None.
    data is the parsed error payload (dict or text) when one was received.
    """

    def __init__(self, message: str, status: int | None = None, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status={self.status!r})"


class RequestTimeoutError(ApiError):
    def __init__(self, message: str = REQUEST_TIMEOUT_MESSAGE) -> None:
        super().__init__(message)


class NetworkError(ApiError):
    """The request never produced a response."""


class InvalidResponseError(ApiError):
    """The origin answered, but not with something this layer can use."""


class HttpStatusError(ApiError):
    def __init__(self, message: str, status: int, data: Any = None) -> None:
        super().__init__(message, status=status, data=data)


class NotFoundError(HttpStatusError):
    pass


class UnauthorizedError(HttpStatusError):
    pass


class RecordAccessDeniedError(NotFoundError, UnauthorizedError):
    """A single-record read refused with 401 / 403.

    Caught by `except NotFoundError` like any failed read, and by
    `except UnauthorizedError` where the caller re-authenticates.
    """


class AuthError(ApiError):
    """Login was refused, or the session holds no token, role or linked doctor."""


def error_message(status: int, data: Any) -> str:
    """Pick the most specific message available in an error payload.

    Preference: payload["message"], payload["error"], "HTTP Error: <status>".
    Text payloads never supply a message.
    """
    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if value:
                return value if isinstance(value, str) else str(value)
    return f"HTTP Error: {status}"


def error_for_status(status: int, data: Any = None) -> HttpStatusError:
    """Classify a non-2xx response into the matching HttpStatusError subclass."""
    message = error_message(status, data)
    if status == 404:
        return NotFoundError(message, status=status, data=data)
    if status in (401, 403):
        return UnauthorizedError(message, status=status, data=data)
    return HttpStatusError(message, status=status, data=data)
