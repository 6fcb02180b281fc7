from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Settings
    app_name: str = Field(default="HTML Screenshot", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")

    # Output Settings
    DEFAULT_WIDTH: int = Field(
        default=1200, description="Viewport width when none is given"
    )
    DEFAULT_HEIGHT: int = Field(
        default=630, description="Viewport height when none is given"
    )

    # Browser Settings
    BROWSER_ARGS: List[str] = Field(
        default=["--no-sandbox", "--disable-setuid-sandbox"],
        description="Chromium command line flags"
    )
    BROWSER_EXECUTABLE_PATH: Optional[str] = Field(
        default=None, description="Custom Chromium binary, bundled browser if unset"
    )
    BROWSER_TIMEOUT: int = Field(
        default=30000, description="Browser operation timeout in milliseconds"
    )
    WAIT_UNTIL: str = Field(
        default="networkidle", description="Load state awaited after injecting content"
    )
    DEVICE_SCALE_FACTOR: float = Field(
        default=1.0, description="Device pixel ratio of the page"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if str(v).upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return str(v).upper()

    @field_validator("WAIT_UNTIL")
    @classmethod
    def validate_wait_until(cls, v):
        valid_states = ["commit", "domcontentloaded", "load", "networkidle"]
        if v not in valid_states:
            raise ValueError(f"WAIT_UNTIL must be one of {valid_states}")
        return v

    @field_validator("DEFAULT_WIDTH", "DEFAULT_HEIGHT", "BROWSER_TIMEOUT")
    @classmethod
    def validate_positive_int(cls, v):
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("DEVICE_SCALE_FACTOR")
    @classmethod
    def validate_scale_factor(cls, v):
        if v <= 0:
            raise ValueError("DEVICE_SCALE_FACTOR must be greater than 0")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance"""
    return Settings()
