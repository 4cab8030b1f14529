"""Focus statistics routes: thin dispatch onto FocusController."""

import sys
from typing import Callable, List, Tuple

from fastapi.responses import JSONResponse

from focos_api.adapters.web.routes import Route
from focos_api.adapters.web.schemas import (
    ERROR_RESPONSES,
    AnoMesFocos,
    BiomaFocos,
    DiaFocos,
    EstadoFocos,
    MesFocos,
    RegiaoFocos,
)
from focos_api.domain.models import FocusStoreError, InvalidFocusQuery
from focos_api.focus_controller import FocusController

FOCUS_ERROR_BODY = {"error": "Erro interno no servidor"}

_TAGS = ("Focos",)


def _log(msg: str):
    print(msg, file=sys.stderr)


def _respond(action: Callable, *args: str) -> JSONResponse:
    try:
        return JSONResponse(content=action(*args))
    except InvalidFocusQuery as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except FocusStoreError as e:
        _log(f"[focus] {action.__name__} failed: {e}")
        return JSONResponse(status_code=500, content=FOCUS_ERROR_BODY)


def focus_routes(controller: FocusController) -> Tuple[Route, ...]:
    def get_monthly_focus_by_estate(month: str, year: str):
        return _respond(controller.monthly_focus_by_estate, month, year)

    def get_year_focus_from_estate(estate: str, year: str):
        return _respond(controller.year_focus_from_estate, estate, year)

    def get_focus_by_region(year: str):
        return _respond(controller.focus_by_region, year)

    def get_focus_from_biomes(year: str):
        return _respond(controller.focus_from_biomes, year)

    def get_all_years_focus_from_estate(estate: str):
        return _respond(controller.all_years_focus_from_estate, estate)

    def get_daily_focus_by_estate_month(month: str, estate: str):
        return _respond(controller.daily_focus_by_estate_month, month, estate)

    def get_daily_focus_from_estates_by_month(month: str):
        return _respond(controller.daily_focus_from_estates_by_month, month)

    first, last = controller.history_range
    daily_year = controller.daily_year

    return (
        Route(
            "GET",
            "/focusEstateMonthYear/{month}/{year}",
            get_monthly_focus_by_estate,
            summary="Quantidade mensal de focos de cada estado por mes e ano",
            tags=_TAGS,
            response_model=List[EstadoFocos],
            responses=ERROR_RESPONSES,
        ),
        Route(
            "GET",
            "/focusYearEstateYear/{estate}/{year}",
            get_year_focus_from_estate,
            summary="Quantidade de focos de um estado em cada mes do ano",
            tags=_TAGS,
            response_model=List[MesFocos],
            responses=ERROR_RESPONSES,
        ),
        Route(
            "GET",
            "/focusRegionYear/{year}",
            get_focus_by_region,
            summary="Total de focos de cada regiao em um ano",
            tags=_TAGS,
            response_model=List[RegiaoFocos],
            responses=ERROR_RESPONSES,
        ),
        Route(
            "GET",
            "/focusBiomesYear/{year}",
            get_focus_from_biomes,
            summary="Total de focos de cada bioma em um ano",
            tags=_TAGS,
            response_model=List[BiomaFocos],
            responses=ERROR_RESPONSES,
        ),
        Route(
            "GET",
            "/focusEstateAllYears/{estate}",
            get_all_years_focus_from_estate,
            summary=f"Quantidade de focos mensal de um estado de {first} a {last}",
            tags=_TAGS,
            response_model=List[AnoMesFocos],
            responses=ERROR_RESPONSES,
        ),
        Route(
            "GET",
            "/focusDailyEstateMonth/{month}/{estate}",
            get_daily_focus_by_estate_month,
            summary="Quantidade de focos em cada dia de um estado em um mes",
            tags=_TAGS,
            response_model=List[DiaFocos],
            responses=ERROR_RESPONSES,
        ),
        Route(
            "GET",
            "/focusDailyEstatesMonth/{month}",
            get_daily_focus_from_estates_by_month,
            summary=f"Total de focos no mes de cada estado em {daily_year}",
            tags=_TAGS,
            response_model=List[EstadoFocos],
            responses=ERROR_RESPONSES,
        ),
    )
