import logging
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # App Settings
    app_name: str = "CQRS Products API"
    api_version: str = "1.0.0"
    api_prefix: str = Field(default="/api", description="Prefix for all product routes")
    app_host: str = "0.0.0.0"
    app_port: int = Field(default=8000, gt=0, le=65535)
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = Field(default=False, description="Emit structured JSON log lines")

    # Data store
    seed_sample_products: bool = Field(
        default=True,
        description="Pre-seed the store with three sample products at startup"
    )

    # Dispatch
    dispatch_timeout_seconds: Optional[float] = Field(
        default=30.0,
        gt=0,
        description="Deadline applied to each dispatched request; None disables it"
    )
    validate_product_names: bool = Field(
        default=False,
        description="Reject products with a blank name"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


settings = Settings()
