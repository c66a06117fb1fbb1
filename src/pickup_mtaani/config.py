"""Client configuration and settings management."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.pickupmtaani.com/api/v1"


class ClientSettings(BaseSettings):
    """Runtime configuration loaded from explicit arguments, environment variables or defaults.

    Settings are frozen once built; a client reads them but never mutates them.
    """

    model_config = SettingsConfigDict(
        env_prefix="PICKUP_MTAANI_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    api_key: Optional[str] = Field(
        default=None,
        description="API key sent in the `apiKey` header of every request.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Pickup Mtaani API.",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds.")
    retries: int = Field(
        default=3,
        ge=0,
        description="Connection retry count handed to the HTTP transport.",
    )
    debug: bool = Field(default=False, description="Log every request and response.")

    @field_validator("base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: Any) -> str:
        return str(value).strip().rstrip("/")

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_to_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None


def build_settings(**overrides: Any) -> ClientSettings:
    """Build settings, letting explicit non-None arguments win over the environment."""
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return ClientSettings(**explicit)
