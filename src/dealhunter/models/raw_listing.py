"""
Capa de entrada: RawListing

Candidato sin validar tal como llega del catálogo semilla,
de la base de datos o de un envío de usuario.
"""

import math
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Tipos de propiedad soportados (conjunto cerrado)."""

    VACATION = "vacation"
    SUITE = "suite"
    PENTHOUSE = "penthouse"
    VILLA = "villa"


Amount = Union[int, float]


def parse_amount(value: Any) -> Optional[Amount]:
    """
    Normaliza un precio crudo a número.

    Devuelve None si el valor falta o no es numérico, para que la
    admisión lo rechace en vez de romper.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value) if value.is_integer() else value

    text = str(value).strip().replace(",", "")
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return parse_amount(float(text))
    except ValueError:
        return None


class RawListing(BaseModel):
    """
    Candidato crudo, inmutable una vez construido.

    `is_domestic` es un dato confiable de origen: no se calcula,
    solo se lee para decidir la admisión.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="ID único dentro del batch")
    category: Category = Field(..., description="Tipo de propiedad")
    property_name: str = Field("", description="Nombre del alojamiento")
    location: str = Field("", description="Ciudad o región")
    description: str = Field("", description="Descripción libre")
    is_domestic: bool = Field(..., description="True solo si está dentro del país servido")
    price_per_night: Optional[Amount] = Field(
        None, description="Precio por noche en unidades enteras (None si no es parseable)"
    )
    url: str = Field("", description="Link original a la página del deal")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "RawListing":
        """
        Construye un RawListing desde un dict crudo (JSON semilla o fila de DB).

        Acepta tanto `is_domestic` como el nombre histórico `is_in_israel`,
        y `price_per_night_ils` como alias del precio. Sin ninguno de los
        dos flags el candidato se toma como extranjero.
        """
        is_domestic = record.get("is_domestic", record.get("is_in_israel", False))
        price = record.get("price_per_night", record.get("price_per_night_ils"))
        url = record.get("url")

        return cls(
            id=int(record["id"]),
            category=Category(str(record["category"])),
            property_name=str(record.get("property_name") or ""),
            location=str(record.get("location") or ""),
            description=str(record.get("description") or ""),
            is_domestic=is_domestic is True,
            price_per_night=parse_amount(price),
            url=url if isinstance(url, str) else "",
        )
