"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PINOTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Appended to str(pin * pin) when no explicit salt is given to the key guard
    salt: str = ""

    # Size of keys from generate_random_key()
    key_length: int = Field(default=20, ge=1)


settings = Settings()
