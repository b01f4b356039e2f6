import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_config() -> dict[str, str]:
    """
    Read configuration from environment variables.
    Called lazily so importing the package never fails on bad settings.
    """
    return {
        "DB_PATH": os.getenv("DB_PATH", "placement_portal.db"),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
        "JOB_LIST_LIMIT": os.getenv("JOB_LIST_LIMIT", "50"),
    }


class _Config:
    """Lazy configuration that only validates when values are actually accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    @property
    def DB_PATH(self) -> str:
        """Path of the SQLite document store."""
        path = self._load()["DB_PATH"].strip()
        if not path:
            raise ValueError("DB_PATH must not be empty.")
        return path

    @property
    def LOG_LEVEL(self) -> int:
        """Logging level name, resolved to its numeric value."""
        raw = self._load()["LOG_LEVEL"].strip().upper()
        if raw not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got '{raw}'"
            )
        return logging.getLevelName(raw)

    @property
    def JOB_LIST_LIMIT(self) -> int:
        """Default number of jobs returned by list_jobs. Must be a positive integer."""
        raw = self._load()["JOB_LIST_LIMIT"]
        try:
            limit = int(raw)
        except ValueError:
            raise ValueError(f"JOB_LIST_LIMIT must be a positive integer, got '{raw}'") from None
        if limit <= 0:
            raise ValueError(f"JOB_LIST_LIMIT must be a positive integer, got {limit}")
        return limit


_cfg = _Config()

# Module-level type declarations for mypy.
# The actual values come from __getattr__ below.
DB_PATH: str
LOG_LEVEL: int
JOB_LIST_LIMIT: int


# Module-level lazy access using __getattr__ (PEP 562).
def __getattr__(name: str) -> str | int:
    if name == "DB_PATH":
        return _cfg.DB_PATH
    if name == "LOG_LEVEL":
        return _cfg.LOG_LEVEL
    if name == "JOB_LIST_LIMIT":
        return _cfg.JOB_LIST_LIMIT
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
