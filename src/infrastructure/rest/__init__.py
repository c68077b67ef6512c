"""REST adapter package.

RestDataProvider speaks the origin's json-server dialect and
get_repositories() binds the typed repositories to one provider.  AuthService
owns the login session.
"""

from src.infrastructure.rest.auth import AuthService
from src.infrastructure.rest.endpoints import Resource
from src.infrastructure.rest.provider import TOTAL_COUNT_HEADER, RestDataProvider
from src.infrastructure.rest.repositories import (
    Repositories,
    RestRepository,
    get_repositories,
)

__all__ = [
    "AuthService",
    "Repositories",
    "Resource",
    "RestDataProvider",
    "RestRepository",
    "TOTAL_COUNT_HEADER",
    "get_repositories",
]
