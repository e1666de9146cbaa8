"""
API configuration settings.

Route prefix, CORS origins and session identifier retry policy.

Dependencies: pydantic, pydantic_settings
System role: HTTP surface configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from qaboard.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """HTTP API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    prefix: str = Field(default="/api/v1", description="Route prefix for all routers")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"],
        description="Allowed CORS origins outside development",
    )
    session_code_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts at generating an unused session identifier",
    )
