"""Error types raised while fetching and decoding Cricbuzz data"""
from typing import Optional


class CricketError(Exception):
    """Base class for all cricket-scores errors"""
    pass


class ConfigError(CricketError):
    """Raised when required configuration is missing or invalid"""
    pass


class FetchError(CricketError):
    """Transport, authentication or HTTP status failure for an endpoint"""

    def __init__(self, endpoint: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.endpoint}: HTTP {self.status_code}: {self.message}"
        return f"{self.endpoint}: {self.message}"


class DeserializationError(CricketError):
    """A required field is missing or malformed in an API response"""

    def __init__(self, path: str, message: str, match_id: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.message = message
        self.match_id = match_id

    def __str__(self) -> str:
        where = self.path
        if self.match_id is not None:
            where = f"{where} (match {self.match_id})"
        return f"{where}: {self.message}"
