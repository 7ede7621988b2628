"""Configuration models for remote webdriver."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransportConfig(BaseModel):
    """Settings for the HTTP transport."""

    timeout: float = Field(default=60.0, description="Request timeout in seconds.")
    headers: dict[str, str] = Field(default_factory=dict)


class DriverConfig(BaseSettings):
    """Top-level configuration for talking to a remote end."""

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_WEBDRIVER_",
        env_file=(".env",),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    service_url: str = Field(
        default="http://127.0.0.1:4444/wd/hub",
        description="Base URL of the remote end, usually http://host:port/wd/hub.",
    )
    session_id: str = Field(default="", description="Identifier of an already running session.")
    transport: TransportConfig = Field(default_factory=TransportConfig)


def load_config(env_file: Path | None = None, **overrides: object) -> DriverConfig:
    """Build the driver configuration.

    Explicit *overrides* win over ``REMOTE_WEBDRIVER_*`` environment
    variables, which win over the dotenv file. ``None`` overrides are skipped
    so unset command line options fall through to the environment.
    """

    settings_kwargs: dict[str, object] = {}
    if env_file is not None:
        settings_kwargs["_env_file"] = env_file
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return DriverConfig(**explicit, **settings_kwargs)
