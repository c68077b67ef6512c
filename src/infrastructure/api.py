"""API settings, HTTP client factory, and scoped client dependency."""

from collections.abc import AsyncGenerator

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.credentials import CredentialProvider
from src.infrastructure.http.client import HttpClient
from src.infrastructure.http.credentials import StaticCredentialProvider


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    api_base_url: str = "http://localhost:9000"
    api_timeout: int = Field(default=30000, gt=0)  # milliseconds
    app_env: str = "development"
    api_token: str | None = None


settings = Settings()


def create_http_client(
    credentials: CredentialProvider | None = None,
    config: Settings = settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpClient:
    """Build one client for one configuration.

    Falls back to a static provider for config.api_token when no provider
    is passed.
    """
    if credentials is None and config.api_token:
        credentials = StaticCredentialProvider(config.api_token)
    return HttpClient(
        base_url=config.api_base_url,
        timeout_ms=config.api_timeout,
        credentials=credentials,
        transport=transport,
    )


async def get_http_client() -> AsyncGenerator[HttpClient, None]:
    """Dependency that yields a client and closes its connections afterwards."""
    async with create_http_client() as client:
        yield client
