"""/noticias: GNews passthrough that never leaks the credential or the cause."""

import sys
from typing import Optional, Tuple

from fastapi import Query
from fastapi.responses import JSONResponse, Response

from focos_api.adapters.web.routes import Route
from focos_api.adapters.web.schemas import ErrorResponse
from focos_api.domain.models import FailureKind, NewsProxyError
from focos_api.ports.outbound import NewsSearchPort

NEWS_ERROR_BODY = {"error": "Falha ao buscar notícias externas."}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _log(msg: str):
    print(msg, file=sys.stderr)


def log_failure(error: NewsProxyError) -> None:
    _log(f"[noticias] {error.kind.value}: {error.detail}")
    if error.kind is FailureKind.UPSTREAM_ERROR:
        _log(f"[noticias] upstream status: {error.status}")
        _log(f"[noticias] upstream headers: {error.headers}")
        _log(f"[noticias] upstream body: {error.body}")


def news_routes(client: NewsSearchPort) -> Tuple[Route, ...]:
    async def noticias(
        to: Optional[str] = Query(
            None, description="Cursor de paginação: só artigos publicados antes desta data."
        ),
    ):
        try:
            body = await client.search(to=to or None)
        except NewsProxyError as e:
            log_failure(e)
            return JSONResponse(status_code=500, content=NEWS_ERROR_BODY)
        return Response(
            content=body,
            media_type="application/json",
            headers=NO_CACHE_HEADERS,
        )

    return (
        Route(
            "GET",
            "/noticias",
            noticias,
            summary="Busca notícias sobre queimadas na API externa GNews",
            tags=("Focos",),
            responses={
                200: {"description": "Uma lista de artigos de notícias"},
                500: {"model": ErrorResponse, "description": "Erro ao buscar notícias externas"},
            },
        ),
    )
