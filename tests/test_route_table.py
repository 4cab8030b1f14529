"""Tests for route table validation."""

import pytest

from focos_api.adapters.web.routes import (
    Route,
    RouteTableError,
    build_router,
    path_params,
    validate_routes,
)


def by_year(year: str):
    return year


def by_month_year(month: str, year: str):
    return month, year


class TestPathParams:
    def test_extracts_names(self):
        assert path_params("/focusEstateMonthYear/{month}/{year}") == ("month", "year")

    def test_no_params(self):
        assert path_params("/hello") == ()


class TestValidateRoutes:
    def test_valid_table(self):
        routes = [
            Route("GET", "/focusRegionYear/{year}", by_year),
            Route("GET", "/focusEstateMonthYear/{month}/{year}", by_month_year),
        ]
        assert validate_routes(routes) == routes

    def test_duplicate(self):
        with pytest.raises(RouteTableError, match="duplicate"):
            validate_routes([
                Route("GET", "/focusRegionYear/{year}", by_year),
                Route("GET", "/focusRegionYear/{year}", by_year),
            ])

    def test_same_path_other_method_allowed(self):
        validate_routes([
            Route("GET", "/focusRegionYear/{year}", by_year),
            Route("DELETE", "/focusRegionYear/{year}", by_year),
        ])

    @pytest.mark.parametrize(
        "route, message",
        [
            (Route("FETCH", "/focusRegionYear/{year}", by_year), "unsupported method"),
            (Route("GET", "focusRegionYear/{year}", by_year), "absolute"),
            (Route("GET", "/focusRegionYear//{year}", by_year), "absolute"),
            (Route("GET", "/focusRegionYear/:year", by_year), "use {name}"),
            (Route("GET", "/focusRegionYear/{year", by_year), "unbalanced"),
            (Route("GET", "/focus/{year}/{year}", by_year), "repeated"),
            (Route("GET", "/focus/{1year}", by_year), "invalid parameter"),
            (Route("GET", "/focusBiomesYear/{month}/{year}", by_year), "no parameter 'month'"),
        ],
    )
    def test_rejects(self, route, message):
        with pytest.raises(RouteTableError, match=message):
            validate_routes([route])


class TestBuildRouter:
    def test_registers_all(self):
        router = build_router([
            Route("GET", "/focusRegionYear/{year}", by_year, summary="Focos por regiao", tags=("Focos",)),
        ])
        assert [r.path for r in router.routes] == ["/focusRegionYear/{year}"]
        assert router.routes[0].summary == "Focos por regiao"

    def test_invalid_table_registers_nothing(self):
        with pytest.raises(RouteTableError):
            build_router([
                Route("GET", "/ok/{year}", by_year),
                Route("GET", "/bad/{month}", by_year),
            ])
