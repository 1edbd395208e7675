"""
OrgHub configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = "orghub/0.1.0"


class OrgHubConfig(BaseSettings):
    """
    OrgHub configuration settings.

    Can be loaded from:
    1. Environment variables (ORGHUB_TOKEN, ORGHUB_API_URL, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = OrgHubConfig()

        # Direct instantiation
        config = OrgHubConfig(
            api_url="https://github.example.com/api/v3",
            token="ghp_xxx"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="ORGHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API endpoint
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the REST API (e.g., https://api.github.com)",
    )

    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        min_length=1,
        description="Value sent in the X-GitHub-Api-Version header",
    )

    # Authentication
    token: Optional[str] = Field(
        default=None,
        description="Personal access or OAuth token sent as a Bearer credential",
    )

    # HTTP settings
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent header for every request",
    )

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Ensure the API URL is an absolute http(s) URL."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("api_url must start with https:// or http://")
        return v.rstrip("/")

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank token as no token."""
        if v is not None and not v.strip():
            return None
        return v


def load_config(**kwargs) -> OrgHubConfig:
    """
    Load OrgHub configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (ORGHUB_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        OrgHubConfig instance

    Raises:
        pydantic.ValidationError: If a value is invalid

    Example:
        ```python
        config = load_config(debug=True)
        ```
    """
    return OrgHubConfig(**kwargs)
