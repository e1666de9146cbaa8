"""
Client configuration settings.

Settings for the polling board client: API location, timeouts and
local state persistence.

Dependencies: pydantic_settings
System role: Client application configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for the board client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QABOARD_CLIENT_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8000/api/v1",
        description="Base URL of the board API",
    )
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    poll_interval: float = Field(
        default=5.0,
        gt=0,
        description="Seconds between question refreshes",
    )
    state_file: str = Field(
        default=".qaboard_state.json",
        description="File holding the persisted client state",
    )
