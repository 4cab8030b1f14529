"""Domain layer: pure Python, no I/O."""

from focos_api.domain.models import (
    FailureKind,
    FocusRecord,
    FocusStoreError,
    InvalidFocusQuery,
    NewsProxyError,
)

__all__ = [
    "FailureKind",
    "FocusRecord",
    "FocusStoreError",
    "InvalidFocusQuery",
    "NewsProxyError",
]
