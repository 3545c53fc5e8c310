"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and serves the bundled
``data.json`` dataset.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when an instance is created, not when this module
    is imported, so ``Settings()`` always reflects the current
    environment.
    """

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Event Registry API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty only console logging is
    # configured.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Path to the JSON dataset the record store is seeded from at
    # startup.  Relative paths are resolved against the project root by
    # ``core.dataset``.
    data_path: str = field(default_factory=lambda: os.getenv("DATA_PATH", "data.json"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "4000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
