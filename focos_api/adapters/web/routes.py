"""Route table: (method, path) -> endpoint, validated before registration."""

import inspect
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from fastapi import APIRouter

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

_PARAM_RE = re.compile(r"\{([^{}]*)\}")


class RouteTableError(ValueError):
    """The route table is malformed; raised at startup."""


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    endpoint: Callable
    summary: str = ""
    tags: Tuple[str, ...] = ()
    response_model: Any = None
    responses: Optional[Dict[int, Dict[str, Any]]] = None


def path_params(path: str) -> Tuple[str, ...]:
    return tuple(_PARAM_RE.findall(path))


def validate_route(route: Route) -> None:
    where = f"{route.method} {route.path}"
    if route.method not in SUPPORTED_METHODS:
        raise RouteTableError(f"{where}: unsupported method")
    if not route.path.startswith("/") or "//" in route.path:
        raise RouteTableError(f"{where}: path must be absolute with no empty segments")
    if ":" in route.path:
        raise RouteTableError(f"{where}: use {{name}} for path parameters")
    if "{" in _PARAM_RE.sub("", route.path) or "}" in _PARAM_RE.sub("", route.path):
        raise RouteTableError(f"{where}: unbalanced braces")

    params = path_params(route.path)
    if len(set(params)) != len(params):
        raise RouteTableError(f"{where}: repeated path parameter")
    accepted = inspect.signature(route.endpoint).parameters
    for name in params:
        if not name.isidentifier():
            raise RouteTableError(f"{where}: invalid parameter name {name!r}")
        if name not in accepted:
            raise RouteTableError(
                f"{where}: {route.endpoint.__name__}() has no parameter {name!r}"
            )


def validate_routes(routes: Iterable[Route]) -> Sequence[Route]:
    routes = list(routes)
    seen = set()
    for route in routes:
        validate_route(route)
        key = (route.method, route.path)
        if key in seen:
            raise RouteTableError(f"{route.method} {route.path}: duplicate route")
        seen.add(key)
    return routes


def build_router(routes: Iterable[Route]) -> APIRouter:
    """Validate the whole table, then register every route."""
    router = APIRouter()
    for route in validate_routes(routes):
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            summary=route.summary or None,
            tags=list(route.tags),
            response_model=route.response_model,
            responses=route.responses,
        )
    return router
