# barbershop/config.py

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Barber Shop Turns API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))

    # SQLite database (file-based) unless overridden
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./barber.db"))
    sql_echo: bool = field(default_factory=lambda: _flag("SQL_ECHO"))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)


settings = Settings()


def get_settings() -> Settings:
    return settings
