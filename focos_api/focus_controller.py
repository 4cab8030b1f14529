"""Focus statistics: aggregates daily hotspot records for the /focus* routes."""

import calendar
import re
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from focos_api.config import DEFAULT_DAILY_YEAR, DEFAULT_HISTORY_RANGE
from focos_api.domain.models import FocusRecord, InvalidFocusQuery
from focos_api.domain.regions import REGIONS, normalize, region_of, state_name, to_uf
from focos_api.ports.outbound import FocusStorePort

_YEAR_RE = re.compile(r"^[0-9]{4}$")


def parse_month(value: str) -> int:
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()) or not 1 <= int(text) <= 12:
        raise InvalidFocusQuery(f"Mês inválido: {value!r}")
    return int(text)


def parse_year(value: str) -> int:
    value = str(value).strip()
    if not _YEAR_RE.match(value):
        raise InvalidFocusQuery(f"Ano inválido: {value!r}")
    return int(value)


def parse_estate(value: str) -> str:
    value = str(value).strip()
    if not value:
        raise InvalidFocusQuery("Estado não informado")
    return value


def _state_key(estado: str) -> str:
    return to_uf(estado) or normalize(estado)


def _ranked(counts: Counter, label: str) -> List[Dict]:
    rows = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [{label: key, "focos": total} for key, total in rows]


class FocusController:
    """One method per focus route. Each returns JSON-ready rows."""

    def __init__(
        self,
        store: FocusStorePort,
        daily_year: int = DEFAULT_DAILY_YEAR,
        history_range: Tuple[int, int] = DEFAULT_HISTORY_RANGE,
    ):
        self._store = store
        self.daily_year = daily_year
        self.history_range = history_range

    def _select(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        estate: Optional[str] = None,
    ) -> Iterable[FocusRecord]:
        key = _state_key(estate) if estate is not None else None
        for r in self._store.records():
            if year is not None and r.day.year != year:
                continue
            if month is not None and r.day.month != month:
                continue
            if key is not None and _state_key(r.estado) != key:
                continue
            yield r

    def monthly_focus_by_estate(self, month: str, year: str) -> List[Dict]:
        m, y = parse_month(month), parse_year(year)
        counts: Counter = Counter()
        for r in self._select(year=y, month=m):
            counts[state_name(r.estado)] += r.focos
        return _ranked(counts, "estado")

    def year_focus_from_estate(self, estate: str, year: str) -> List[Dict]:
        e, y = parse_estate(estate), parse_year(year)
        counts: Counter = Counter()
        for r in self._select(year=y, estate=e):
            counts[r.day.month] += r.focos
        return [{"mes": m, "focos": counts[m]} for m in range(1, 13)]

    def focus_by_region(self, year: str) -> List[Dict]:
        y = parse_year(year)
        counts: Counter = Counter()
        for r in self._select(year=y):
            region = region_of(r.estado)
            if region:
                counts[region] += r.focos
        return [{"regiao": region, "focos": counts[region]} for region in REGIONS]

    def focus_from_biomes(self, year: str) -> List[Dict]:
        y = parse_year(year)
        counts: Counter = Counter()
        labels: Dict[str, str] = {}
        for r in self._select(year=y):
            if r.bioma:
                key = normalize(r.bioma)
                labels.setdefault(key, r.bioma)
                counts[labels[key]] += r.focos
        return _ranked(counts, "bioma")

    def all_years_focus_from_estate(self, estate: str) -> List[Dict]:
        e = parse_estate(estate)
        first, last = self.history_range
        counts: Counter = Counter()
        for r in self._select(estate=e):
            if first <= r.day.year <= last:
                counts[(r.day.year, r.day.month)] += r.focos
        return [
            {"ano": y, "mes": m, "focos": counts[(y, m)]}
            for y in range(first, last + 1)
            for m in range(1, 13)
        ]

    def daily_focus_by_estate_month(self, month: str, estate: str) -> List[Dict]:
        m, e = parse_month(month), parse_estate(estate)
        counts: Counter = Counter()
        for r in self._select(year=self.daily_year, month=m, estate=e):
            counts[r.day.day] += r.focos
        days = calendar.monthrange(self.daily_year, m)[1]
        return [{"dia": d, "focos": counts[d]} for d in range(1, days + 1)]

    def daily_focus_from_estates_by_month(self, month: str) -> List[Dict]:
        m = parse_month(month)
        counts: Counter = Counter()
        for r in self._select(year=self.daily_year, month=m):
            counts[state_name(r.estado)] += r.focos
        return _ranked(counts, "estado")
