"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional


class FailureKind(str, Enum):
    """Why a news search failed. Logged, never shown to the caller."""

    CONFIG_MISSING = "config-missing"
    UPSTREAM_ERROR = "upstream-error"
    NO_RESPONSE = "no-response"
    BUILD_ERROR = "build-error"


class NewsProxyError(Exception):
    """Raised by news clients for every failure category."""

    def __init__(
        self,
        kind: FailureKind,
        detail: str,
        status: int = 0,
        headers: Optional[Dict[str, str]] = None,
        body: str = "",
    ):
        super().__init__(f"{kind.value}: {detail}")
        self.kind = kind
        self.detail = detail
        self.status = status
        self.headers = headers or {}
        self.body = body


class FocusStoreError(Exception):
    """The focus dataset could not be read."""


class InvalidFocusQuery(ValueError):
    """A focus route received a malformed path parameter."""


@dataclass(frozen=True)
class FocusRecord:
    """Daily count of fire hotspots detected in one state."""

    day: date
    estado: str
    bioma: str
    focos: int

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "FocusRecord":
        focos = int(raw.get("focos", 0))
        if focos < 0:
            raise ValueError(f"negative focos: {focos}")
        return cls(
            day=date.fromisoformat(str(raw["date"])),
            estado=str(raw["estado"]).strip(),
            bioma=str(raw.get("bioma", "")).strip(),
            focos=focos,
        )
