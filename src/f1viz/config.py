"""Server settings read from the environment."""

import os
from pathlib import Path
from typing import Literal, Mapping

from pydantic import BaseModel, Field, field_validator

PACKAGE_STATIC_DIR: Path = Path(__file__).resolve().parent / "static"
DEFAULT_BUILD_DIR = "build"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    """Runtime settings for the static server."""

    host: str = Field(default="0.0.0.0", description="Interface to listen on")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")
    static_dir: Path = Field(default=PACKAGE_STATIC_DIR, description="Directory holding the UI bundle")
    log_level: LogLevel = Field(default="INFO", description="Root logging level")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Recognised variables: ``PORT``, ``HOST``, ``F1VIZ_STATIC_DIR`` and
        ``F1VIZ_LOG_LEVEL``. Without ``F1VIZ_STATIC_DIR`` a ``build``
        directory in the working directory is used when present, else the
        bundled placeholder page.

        Raises:
            pydantic.ValidationError: If a value is out of range
        """
        env = os.environ if environ is None else environ

        static_dir = env.get("F1VIZ_STATIC_DIR")
        if static_dir:
            resolved = Path(static_dir)
        elif Path(DEFAULT_BUILD_DIR).is_dir():
            resolved = Path(DEFAULT_BUILD_DIR).resolve()
        else:
            resolved = PACKAGE_STATIC_DIR

        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=env.get("PORT", 3000),
            static_dir=resolved,
            log_level=env.get("F1VIZ_LOG_LEVEL", "INFO"),
        )
