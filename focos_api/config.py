"""Configuration loaded from the environment (.env supported)."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import List, Tuple

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PORT = 3000
DEFAULT_FOCUS_DATA_FILE = "data/focos.json"
DEFAULT_DAILY_YEAR = 2025
# Monthly history served by /focusEstateAllYears
DEFAULT_HISTORY_RANGE = (2003, 2024)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


def _env_list(name: str) -> List[str]:
    return [v.strip() for v in os.getenv(name, "").split(",") if v.strip()]


@dataclass
class GNewsConfig:
    api_key: str = ""
    base_url: str = "https://gnews.io/api/v4/search"
    country: str = "br"
    max_results: int = 10

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass
class FocusConfig:
    data_file: str = DEFAULT_FOCUS_DATA_FILE
    daily_year: int = DEFAULT_DAILY_YEAR
    history_range: Tuple[int, int] = DEFAULT_HISTORY_RANGE


@dataclass
class AppConfig:
    """Typed configuration passed explicitly into the app factory."""

    port: int = DEFAULT_PORT
    cors_origins: List[str] = field(default_factory=list)
    gnews: GNewsConfig = field(default_factory=GNewsConfig)
    focus: FocusConfig = field(default_factory=FocusConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=_env_int("PORT", DEFAULT_PORT),
            cors_origins=_env_list("CORS_ORIGINS"),
            gnews=GNewsConfig(api_key=os.getenv("GNEWS_API_KEY", "").strip()),
            focus=FocusConfig(
                data_file=os.getenv("FOCUS_DATA_FILE", DEFAULT_FOCUS_DATA_FILE),
                daily_year=_env_int("FOCUS_DAILY_YEAR", DEFAULT_DAILY_YEAR),
            ),
        )
