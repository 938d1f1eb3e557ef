from __future__ import annotations

import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Core
    PORT: int = Field(default=4000)
    ENVIRONMENT: str = Field(default="development")  # development | production
    CORS_ORIGINS: str = Field(default="")  # comma-separated, production only

    # Storage (empty = derived from ENVIRONMENT)
    DATA_DIR: str = Field(default="")
    UPLOAD_DIR: str = Field(default="")
    DATA_FILE_NAME: str = Field(default="db.json")

    # Limits
    MAX_JSON_BODY_BYTES: int = Field(default=5 * 1024 * 1024)

    # Single-process write serialization around read-modify-write cycles
    SERIALIZE_WRITES: bool = Field(default=True)

    # Optional HMAC key for password digests; empty keeps plain sha256
    PASSWORD_PEPPER: str = Field(default="")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    @property
    def base_dir(self) -> str:
        if self.is_production:
            return os.getcwd()
        return os.path.join(os.getcwd(), "server")

    @property
    def data_dir(self) -> str:
        return os.path.abspath(self.DATA_DIR) if self.DATA_DIR else os.path.join(self.base_dir, "data")

    @property
    def data_file(self) -> str:
        return os.path.join(self.data_dir, self.DATA_FILE_NAME)

    @property
    def upload_dir(self) -> str:
        return os.path.abspath(self.UPLOAD_DIR) if self.UPLOAD_DIR else os.path.join(self.base_dir, "uploads")

    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]
        if self.is_production and origins:
            return origins
        return ["*"]


settings = Settings()
