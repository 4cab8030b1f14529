"""GNews client: search for wildfire news in Brazilian outlets."""

import asyncio
from typing import Dict, Optional

import aiohttp

from focos_api.config import GNewsConfig
from focos_api.domain.models import FailureKind, NewsProxyError

# Matches wildfire coverage of Brazilian regions and biomes, excluding the
# Los Angeles fires that dominate "queimadas" results otherwise.
WILDFIRE_QUERY = (
    'queimadas AND (Amazônia OR floresta OR cerrado OR Pantanal OR Norte OR Sul '
    'OR Sudeste OR Nordeste OR Caatinga OR Pampa OR "Mata Atlântica" '
    'OR "Centro-Oeste" OR Brasil) NOT ("LA" OR "Los Angeles")'
)


class GNewsClient:
    """Thin passthrough to the GNews search endpoint."""

    def __init__(self, config: GNewsConfig):
        self._config = config

    @property
    def is_configured(self) -> bool:
        return self._config.is_configured

    def build_params(self, to: Optional[str] = None) -> Dict[str, str]:
        params = {
            "q": WILDFIRE_QUERY,
            "country": self._config.country,
            "max": str(self._config.max_results),
            "token": self._config.api_key,
        }
        if to:
            params["to"] = to
        return params

    async def search(self, to: Optional[str] = None) -> bytes:
        """Return the raw GNews response body.

        Args:
            to: Optional pagination cursor; only articles published before
                this timestamp are returned.

        Raises:
            NewsProxyError: tagged with the failure kind.
        """
        if not self.is_configured:
            raise NewsProxyError(
                FailureKind.CONFIG_MISSING,
                "GNEWS_API_KEY not configured.",
            )

        try:
            params = self.build_params(to)
            async with aiohttp.ClientSession() as session:
                async with session.get(self._config.base_url, params=params) as resp:
                    body = await resp.read()
                    if not 200 <= resp.status < 300:
                        raise NewsProxyError(
                            FailureKind.UPSTREAM_ERROR,
                            f"GNews responded with status {resp.status}",
                            status=resp.status,
                            headers=dict(resp.headers),
                            body=body.decode("utf-8", errors="replace"),
                        )
                    return body
        except NewsProxyError:
            raise
        except aiohttp.InvalidURL as e:
            raise NewsProxyError(FailureKind.BUILD_ERROR, f"invalid URL: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NewsProxyError(
                FailureKind.NO_RESPONSE, str(e) or type(e).__name__
            ) from e
        except Exception as e:
            raise NewsProxyError(
                FailureKind.BUILD_ERROR, str(e) or type(e).__name__
            ) from e
