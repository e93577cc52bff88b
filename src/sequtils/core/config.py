import os
from typing import Optional

from pydantic import BaseModel, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}. Got '{value}'."
            )
        return value

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        overrides = {
            field: environ[field]
            for field in ("LOG_LEVEL", "LOG_FORMAT")
            if environ.get(field)
        }
        return cls(**overrides)


settings = Settings.load()
