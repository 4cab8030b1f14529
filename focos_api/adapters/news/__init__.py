"""News search adapters."""

from focos_api.adapters.news.gnews_client import GNewsClient, WILDFIRE_QUERY

__all__ = ["GNewsClient", "WILDFIRE_QUERY"]
