"""Focos de Queimadas API: wildfire statistics and news proxy."""

from focos_api.config import AppConfig, __version__
from focos_api.adapters.news.gnews_client import GNewsClient
from focos_api.adapters.storage.json_store import JsonFocusStore
from focos_api.focus_controller import FocusController

__all__ = [
    "__version__",
    "AppConfig",
    "FocusController",
    "GNewsClient",
    "JsonFocusStore",
]
