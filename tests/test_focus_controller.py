"""Tests for FocusController aggregations."""

import pytest

from focos_api.domain.models import InvalidFocusQuery
from focos_api.focus_controller import FocusController, parse_month, parse_year
from tests.helpers import MemoryStore, rec

RECORDS = [
    rec("2024-08-10", "MT", "Amazônia", 40),
    rec("2024-08-11", "Mato Grosso", "Cerrado", 10),
    rec("2024-08-11", "PA", "Amazônia", 30),
    rec("2024-09-01", "SP", "Mata Atlântica", 5),
    rec("2023-08-10", "MT", "Amazônia", 99),
    rec("2025-07-14", "MT", "Cerrado", 7),
    rec("2025-07-14", "mato grosso", "Cerrado", 3),
    rec("2025-07-20", "BA", "Caatinga", 12),
    rec("2025-08-01", "MT", "Cerrado", 1),
]


@pytest.fixture
def controller():
    return FocusController(MemoryStore(RECORDS), daily_year=2025, history_range=(2023, 2024))


class TestParsing:
    def test_month_accepts_zero_padded(self):
        assert parse_month("08") == 8

    @pytest.mark.parametrize("value", ["0", "13", "ago", "", "٨", "+3"])
    def test_month_rejects(self, value):
        with pytest.raises(InvalidFocusQuery):
            parse_month(value)

    def test_year(self):
        assert parse_year("2024") == 2024

    @pytest.mark.parametrize("value", ["24", "20245", "dois mil", "٢٠٢٤"])
    def test_year_rejects(self, value):
        with pytest.raises(InvalidFocusQuery):
            parse_year(value)


class TestMonthlyByEstate:
    def test_groups_uf_and_name_together(self, controller):
        rows = controller.monthly_focus_by_estate("8", "2024")
        assert rows == [
            {"estado": "Mato Grosso", "focos": 50},
            {"estado": "Pará", "focos": 30},
        ]

    def test_empty_month(self, controller):
        assert controller.monthly_focus_by_estate("1", "2024") == []


class TestYearFromEstate:
    def test_zero_filled_months(self, controller):
        rows = controller.year_focus_from_estate("MT", "2024")
        assert len(rows) == 12
        assert rows[7] == {"mes": 8, "focos": 50}
        assert rows[0] == {"mes": 1, "focos": 0}

    def test_state_name_is_accent_insensitive(self, controller):
        rows = controller.year_focus_from_estate("sao paulo", "2024")
        assert rows[8] == {"mes": 9, "focos": 5}

    def test_blank_estate(self, controller):
        with pytest.raises(InvalidFocusQuery):
            controller.year_focus_from_estate("  ", "2024")


class TestByRegion:
    def test_all_regions_in_fixed_order(self, controller):
        rows = controller.focus_by_region("2024")
        assert [r["regiao"] for r in rows] == ["Norte", "Nordeste", "Centro-Oeste", "Sudeste", "Sul"]
        assert {r["regiao"]: r["focos"] for r in rows} == {
            "Norte": 30,
            "Nordeste": 0,
            "Centro-Oeste": 50,
            "Sudeste": 5,
            "Sul": 0,
        }


class TestByBiome:
    def test_ranked(self, controller):
        assert controller.focus_from_biomes("2024") == [
            {"bioma": "Amazônia", "focos": 70},
            {"bioma": "Cerrado", "focos": 10},
            {"bioma": "Mata Atlântica", "focos": 5},
        ]

    def test_spellings_merged_under_first_seen(self):
        store = MemoryStore([
            rec("2024-08-10", "PA", "Amazônia", 5),
            rec("2024-08-11", "AM", "AMAZONIA", 7),
            rec("2024-08-12", "MT", "cerrado", 2),
        ])
        rows = FocusController(store).focus_from_biomes("2024")
        assert rows == [
            {"bioma": "Amazônia", "focos": 12},
            {"bioma": "cerrado", "focos": 2},
        ]


class TestAllYears:
    def test_history_range_only(self, controller):
        rows = controller.all_years_focus_from_estate("MT")
        assert len(rows) == 24
        assert rows[0] == {"ano": 2023, "mes": 1, "focos": 0}
        assert {"ano": 2023, "mes": 8, "focos": 99} in rows
        assert {"ano": 2024, "mes": 8, "focos": 50} in rows
        assert sum(r["focos"] for r in rows) == 149


class TestDaily:
    def test_days_of_month_in_daily_year(self, controller):
        rows = controller.daily_focus_by_estate_month("7", "Mato Grosso")
        assert len(rows) == 31
        assert rows[13] == {"dia": 14, "focos": 10}
        assert sum(r["focos"] for r in rows) == 10

    def test_february_length(self, controller):
        assert len(controller.daily_focus_by_estate_month("2", "MT")) == 28

    def test_estates_by_month(self, controller):
        assert controller.daily_focus_from_estates_by_month("07") == [
            {"estado": "Bahia", "focos": 12},
            {"estado": "Mato Grosso", "focos": 10},
        ]
