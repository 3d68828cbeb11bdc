#deployhq_client\config.py

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from deployhq_client.core.models import (
    DEFAULT_SERVICE_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)


class ClientSettings(BaseSettings):
    """DeployHQ account settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DEPLOYHQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Account (NO DEFAULTS)
    subdomain: str
    username: str
    api_key: str

    # Transport
    service_host: str = DEFAULT_SERVICE_HOST
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
