"""
Deals publicados por usuarios.

DealSubmission es el payload ya validado de un formulario;
StoredDeal es una fila de la tabla `deals` en Supabase.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from dealhunter.models.raw_listing import Amount, Category, RawListing, parse_amount


class DealSubmission(BaseModel):
    """Datos de un deal enviado por un anfitrión."""

    category: Category
    property_name: str = ""
    location: str
    price_per_night: Amount
    description: str = ""
    url: str = Field("", description="Deep link opcional; vacío si no hay")
    host_name: str = ""
    host_phone: str
    host_email: Optional[str] = None
    amenities: list[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(None, description="Solo en updates, imagen subida a mano")

    def to_db_dict(self) -> dict:
        """Convierte a diccionario para inserción en Supabase."""
        data = self.model_dump(exclude={"image_url"})
        data["category"] = self.category.value
        if self.image_url:
            data["image_url"] = self.image_url
        return data


class StoredDeal(BaseModel):
    """Fila de la tabla `deals`."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[str] = None
    category: Category
    property_name: str = ""
    location: str = ""
    price_per_night: Optional[Amount] = None
    description: str = ""
    url: str = ""
    host_name: str = ""
    host_phone: str = ""
    host_email: Optional[str] = None
    amenities: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    is_domestic: bool = True
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StoredDeal":
        """Construye desde una fila de Supabase tolerando nulos."""
        return cls(
            id=int(row["id"]),
            user_id=row.get("user_id"),
            category=Category(str(row["category"])),
            property_name=row.get("property_name") or "",
            location=row.get("location") or "",
            price_per_night=parse_amount(row.get("price_per_night")),
            description=row.get("description") or "",
            url=row.get("url") or "",
            host_name=row.get("host_name") or "",
            host_phone=row.get("host_phone") or "",
            host_email=row.get("host_email"),
            amenities=row.get("amenities") or [],
            image_url=row.get("image_url"),
            is_domestic=row.get("is_domestic", True) is not False,
            created_at=row.get("created_at"),
        )

    def to_raw_listing(self) -> RawListing:
        """Da forma de candidato para pasar por la admisión."""
        return RawListing(
            id=self.id,
            category=self.category,
            property_name=self.property_name,
            location=self.location,
            description=self.description,
            is_domestic=self.is_domestic,
            price_per_night=self.price_per_night,
            url=self.url,
        )
