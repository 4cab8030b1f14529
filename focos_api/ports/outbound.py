"""Outbound ports: interfaces for external system adapters."""

from typing import List, Optional, Protocol, runtime_checkable

from focos_api.domain.models import FocusRecord


@runtime_checkable
class NewsSearchPort(Protocol):
    """Interface for upstream news search clients.

    Implementations return the raw upstream body and raise NewsProxyError
    on any failure.
    """

    @property
    def is_configured(self) -> bool: ...

    async def search(self, to: Optional[str] = None) -> bytes: ...


@runtime_checkable
class FocusStorePort(Protocol):
    """Interface for the focus dataset. Raises FocusStoreError when unreadable."""

    def records(self) -> List[FocusRecord]: ...
