"""Client settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Kamailio JSON-RPC endpoint settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KAMRPC_",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(default="http://127.0.0.1:5060/RPC")
    skip_tls_verify: bool = Field(default=False)
    timeout_seconds: float = Field(default=10.0, gt=0)


def load_settings(**overrides: Any) -> ClientSettings:
    """Load settings from the environment, applying non-None overrides."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return ClientSettings(**values)
