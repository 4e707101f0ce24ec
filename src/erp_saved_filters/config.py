"""Runtime configuration loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import API_CONFIG

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    """Connection settings for the saved-filters backend."""

    api_base_url: str = API_CONFIG["DEFAULT_BASE_URL"]
    api_token: Optional[str] = None
    timeout: float = API_CONFIG["DEFAULT_TIMEOUT"]
    origin: Optional[str] = None
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load settings from environment variables (and a .env file, if present).

    Returns:
        Settings built from ERP_API_BASE_URL, ERP_API_TOKEN, ERP_API_TIMEOUT,
        ERP_API_ORIGIN and ERP_LOG_LEVEL

    Raises:
        ValueError: When ERP_API_TIMEOUT is not a positive number
    """
    load_dotenv()

    raw_timeout = os.getenv("ERP_API_TIMEOUT")
    timeout = float(API_CONFIG["DEFAULT_TIMEOUT"])
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"ERP_API_TIMEOUT must be a number, got '{raw_timeout}'") from None
        if timeout <= 0:
            raise ValueError(f"ERP_API_TIMEOUT must be positive, got '{raw_timeout}'")

    return Settings(
        api_base_url=os.getenv("ERP_API_BASE_URL", API_CONFIG["DEFAULT_BASE_URL"]).rstrip("/"),
        api_token=os.getenv("ERP_API_TOKEN") or None,
        timeout=timeout,
        origin=os.getenv("ERP_API_ORIGIN") or None,
        log_level=os.getenv("ERP_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for scripts."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
