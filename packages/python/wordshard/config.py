"""Configuration for wordshard using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .encoding import EncodingParameters
from .errors import InvalidEncoding


class Settings(BaseSettings):
    """Defaults for the command line and logging, overridable via WORDSHARD_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="WORDSHARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(default="warning")
    log_format: Literal["console", "json"] = Field(default="console")

    default_total: int = Field(default=6, ge=1, le=255)
    default_required: int = Field(default=3, ge=1, le=255)
    default_word_count: int = Field(default=8, ge=1, description="Secret phrase length in words")
    default_encoding: str = "rs=6.4"

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("default_encoding")
    @classmethod
    def _parse_encoding(cls, value: str) -> str:
        try:
            EncodingParameters.parse(value)
        except InvalidEncoding as e:
            raise ValueError(str(e)) from e
        return value

    @model_validator(mode="after")
    def _check_threshold(self) -> "Settings":
        if self.default_required > self.default_total:
            raise ValueError("default_required must not exceed default_total")
        return self

    @property
    def encoding(self) -> EncodingParameters:
        return EncodingParameters.parse(self.default_encoding)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
