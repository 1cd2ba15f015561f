# core/config.py
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    # App & logging
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")

    # -----------------------------
    # Narrative analysis
    # -----------------------------
    OPENAI_API_KEY: str | None = Field(default=None)
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    ANALYSIS_TIMEOUT_S: float = Field(default=60.0)

    # Market named in analysis prompts
    MARKET: str = Field(default="Dallas")

    model_config = SettingsConfigDict(
        env_prefix="HOMECALC_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("OPENAI_API_KEY", mode="before")
    @classmethod
    def _blank_key_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("ANALYSIS_TIMEOUT_S", mode="before")
    @classmethod
    def _timeout_positive(cls, v: Any) -> Any:
        f = float(v)
        if f <= 0:
            raise ValueError("ANALYSIS_TIMEOUT_S must be > 0")
        return f

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return str(v).strip().upper()


config = AppConfig()
