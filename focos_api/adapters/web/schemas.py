"""Response schemas: documented in the generated OpenAPI."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class EstadoFocos(BaseModel):
    estado: str
    focos: int


class MesFocos(BaseModel):
    mes: int
    focos: int


class RegiaoFocos(BaseModel):
    regiao: str
    focos: int


class BiomaFocos(BaseModel):
    bioma: str
    focos: int


class AnoMesFocos(BaseModel):
    ano: int
    mes: int
    focos: int


class DiaFocos(BaseModel):
    dia: int
    focos: int


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Parâmetro inválido"},
    500: {"model": ErrorResponse, "description": "Erro interno no servidor"},
}
