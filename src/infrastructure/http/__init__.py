"""HTTP transport package.

Exports the HttpClient transport and the CredentialProvider
implementations it reads bearer tokens from.
"""

from src.infrastructure.http.client import ApiResponse, HttpClient
from src.infrastructure.http.credentials import StaticCredentialProvider, TokenStore

__all__ = [
    "ApiResponse",
    "HttpClient",
    "StaticCredentialProvider",
    "TokenStore",
]
