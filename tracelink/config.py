from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_URL = "https://tracelink.app/rest"

ResponseFormat = Literal["json", "xml"]
Charset = Literal["UTF-8", "CP850"]


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str | None = Field(default=None, validate_default=True)
    format: ResponseFormat = "json"
    charset: Charset = "UTF-8"

    @field_validator("access_token")
    @classmethod
    def require_token(cls, value: str | None) -> str:
        if not value:
            raise ValueError("access_token is required")
        return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    access_token: str | None = Field(default=None, alias="TRACELINK_ACCESS_TOKEN")
    format: ResponseFormat = Field(default="json", alias="TRACELINK_FORMAT")
    charset: Charset = Field(default="UTF-8", alias="TRACELINK_CHARSET")
    base_url: str = Field(default=BASE_URL, alias="TRACELINK_BASE_URL")
    timeout_s: float | None = Field(default=None, alias="TRACELINK_TIMEOUT_S")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


def get_settings() -> Settings:
    return Settings()
