"""Port interfaces (Hexagonal Architecture)."""

from focos_api.ports.outbound import FocusStorePort, NewsSearchPort

__all__ = [
    "FocusStorePort",
    "NewsSearchPort",
]
