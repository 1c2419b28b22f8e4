"""
Capa de salida: Listing y telemetría de rechazos.

Es lo que ve el usuario final luego de pasar por la admisión.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dealhunter.models.raw_listing import Amount, Category


class Listing(BaseModel):
    """
    Deal validado. Mismo contenido que RawListing sin `is_domestic`.

    Solo lo crea el pipeline de admisión.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    category: Category
    property_name: str
    location: str
    price_per_night: Amount
    description: str
    url: str


class RejectionType(str, Enum):
    """Categoría de rechazo (una por candidato rechazado)."""

    LOCATION = "location"
    BUDGET = "budget"
    URL = "url"


class RejectionRecord(BaseModel):
    """Por qué un candidato no fue admitido."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Nombre del alojamiento rechazado")
    reason: str = Field(..., description="Motivo legible para operadores")
    type: RejectionType = Field(..., description="location, budget o url")


class AdmissionResult(BaseModel):
    """Resultado de una corrida de admisión."""

    model_config = ConfigDict(frozen=True)

    accepted: tuple[Listing, ...] = ()
    rejections: tuple[RejectionRecord, ...] = ()
    rejected_by_location: int = 0
    rejected_by_budget: int = 0
    rejected_by_url: int = 0

    @computed_field
    @property
    def rejected_count(self) -> int:
        """Total de rechazos (suma de las tres categorías)."""
        return self.rejected_by_location + self.rejected_by_budget + self.rejected_by_url
