"""Brazilian states (UF), their names and macro-regions."""

import unicodedata
from typing import Dict, Optional

REGIONS = ("Norte", "Nordeste", "Centro-Oeste", "Sudeste", "Sul")

# UF -> (state name, region)
STATES: Dict[str, tuple] = {
    "AC": ("Acre", "Norte"),
    "AP": ("Amapá", "Norte"),
    "AM": ("Amazonas", "Norte"),
    "PA": ("Pará", "Norte"),
    "RO": ("Rondônia", "Norte"),
    "RR": ("Roraima", "Norte"),
    "TO": ("Tocantins", "Norte"),
    "AL": ("Alagoas", "Nordeste"),
    "BA": ("Bahia", "Nordeste"),
    "CE": ("Ceará", "Nordeste"),
    "MA": ("Maranhão", "Nordeste"),
    "PB": ("Paraíba", "Nordeste"),
    "PE": ("Pernambuco", "Nordeste"),
    "PI": ("Piauí", "Nordeste"),
    "RN": ("Rio Grande do Norte", "Nordeste"),
    "SE": ("Sergipe", "Nordeste"),
    "DF": ("Distrito Federal", "Centro-Oeste"),
    "GO": ("Goiás", "Centro-Oeste"),
    "MT": ("Mato Grosso", "Centro-Oeste"),
    "MS": ("Mato Grosso do Sul", "Centro-Oeste"),
    "ES": ("Espírito Santo", "Sudeste"),
    "MG": ("Minas Gerais", "Sudeste"),
    "RJ": ("Rio de Janeiro", "Sudeste"),
    "SP": ("São Paulo", "Sudeste"),
    "PR": ("Paraná", "Sul"),
    "RS": ("Rio Grande do Sul", "Sul"),
    "SC": ("Santa Catarina", "Sul"),
}


def normalize(text: str) -> str:
    """Uppercase, strip accents and collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(stripped.upper().split())


_BY_NAME = {normalize(name): uf for uf, (name, _) in STATES.items()}


def to_uf(estado: str) -> Optional[str]:
    """Resolve a state name or UF code to its UF code, or None if unknown."""
    key = normalize(estado)
    if key in STATES:
        return key
    return _BY_NAME.get(key)


def state_name(estado: str) -> str:
    uf = to_uf(estado)
    return STATES[uf][0] if uf else estado


def region_of(estado: str) -> Optional[str]:
    uf = to_uf(estado)
    return STATES[uf][1] if uf else None
