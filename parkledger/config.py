# parkledger/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Facility ──────────────────────────────────────────────────────────
    FACILITY_FILE: str = "facilities.txt"     # one pipe-delimited record per facility
    FACILITY_NAME: str = "Main Facility"      # loaded (or created) on startup
    DEFAULT_CAPACITY: int = 20                # used when FACILITY_NAME is not on file

    # ── Reports ───────────────────────────────────────────────────────────
    REPORTS_DIR: str = "reports"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
