"""FastAPI application factory and entrypoint."""

import sys
from pathlib import Path
from typing import Optional, Tuple

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from focos_api.adapters.news.gnews_client import GNewsClient
from focos_api.adapters.storage.json_store import JsonFocusStore
from focos_api.adapters.web.focus_routes import focus_routes
from focos_api.adapters.web.news_routes import news_routes
from focos_api.adapters.web.routes import Route, build_router
from focos_api.config import AppConfig, __version__
from focos_api.focus_controller import FocusController
from focos_api.ports.outbound import FocusStorePort, NewsSearchPort


def _log(msg: str):
    print(msg, file=sys.stderr)


async def hello():
    return PlainTextResponse("Hello world")


def app_routes(news_client: NewsSearchPort, controller: FocusController) -> Tuple[Route, ...]:
    hello_route = Route(
        "GET",
        "/hello",
        hello,
        summary="Retorna uma mensagem de hello world",
        tags=("Teste",),
    )
    return (hello_route,) + news_routes(news_client) + focus_routes(controller)


def create_app(
    config: Optional[AppConfig] = None,
    news_client: Optional[NewsSearchPort] = None,
    focus_store: Optional[FocusStorePort] = None,
) -> FastAPI:
    """Build the app. Collaborators default to the ones described by config."""
    config = config or AppConfig.from_env()
    news_client = news_client or GNewsClient(config.gnews)
    if focus_store is None:
        data_file = Path(config.focus.data_file)
        if not data_file.exists():
            _log(
                f"[server] focus data file {data_file.resolve()} not found, "
                "/focus* routes will serve empty aggregates"
            )
        focus_store = JsonFocusStore(str(data_file))
    controller = FocusController(
        focus_store,
        daily_year=config.focus.daily_year,
        history_range=config.focus.history_range,
    )

    app = FastAPI(title="Focos de Queimadas API", version=__version__)
    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=False,
            allow_methods=["GET", "OPTIONS"],
            allow_headers=["*"],
        )
    app.include_router(build_router(app_routes(news_client, controller)))
    app.state.config = config

    if not news_client.is_configured:
        _log("[server] GNEWS_API_KEY not set, /noticias will answer 500")
    return app


app = create_app()


def main():
    config = AppConfig.from_env()
    uvicorn.run(create_app(config), host="0.0.0.0", port=config.port, log_level="info")


if __name__ == "__main__":
    main()
