"""Configuration loading and validation"""
import os
from typing import Optional
import pytz
from dotenv import load_dotenv

from .errors import ConfigError
from .utils.logger import setup_logger

# Load environment variables from .env file before LOG_LEVEL is read
load_dotenv()

logger = setup_logger(__name__)

DEFAULT_API_HOST = "cricbuzz-cricket.p.rapidapi.com"


class Config:
    """Application configuration"""

    def __init__(self):
        """Load and validate configuration"""
        # RapidAPI credentials
        self.api_key = self._get_required("CRICKET_API_KEY")
        self.api_host = os.getenv("CRICKET_API_HOST", DEFAULT_API_HOST)
        self.base_url = os.getenv("CRICKET_API_BASE_URL", f"https://{self.api_host}")

        self.request_timeout = self._get_float("CRICKET_REQUEST_TIMEOUT", 30.0)

        # Display timezone for schedules; local time when unset
        self.timezone: Optional[str] = os.getenv("CRICKET_TIMEZONE") or None

        # Malformed match handling
        self.skip_malformed = os.getenv("CRICKET_SKIP_MALFORMED", "false").lower() == "true"

        self._validate()
        logger.debug("Configuration loaded successfully")

    def _get_required(self, key: str) -> str:
        """Get required environment variable"""
        value = os.getenv(key)
        if not value:
            raise ConfigError(f"Required environment variable {key} is not set")
        return value

    def _get_float(self, key: str, default: float) -> float:
        """Get numeric environment variable"""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            return float(raw)
        except ValueError:
            raise ConfigError(f"{key} must be a number, got {raw!r}")

    def _validate(self):
        """Validate configuration values"""
        if self.request_timeout <= 0:
            raise ConfigError("CRICKET_REQUEST_TIMEOUT must be positive")

        if self.timezone and self.timezone not in pytz.all_timezones_set:
            raise ConfigError(f"CRICKET_TIMEZONE {self.timezone!r} is not a known timezone")

        logger.debug(f"API host: {self.api_host}")
        logger.debug(f"Request timeout: {self.request_timeout}s")
        if self.timezone:
            logger.debug(f"Schedule timezone: {self.timezone}")
        else:
            logger.debug("Schedule timezone: local")
        if self.skip_malformed:
            logger.debug("Malformed matches will be skipped")
