"""
Constructor de prompts para el generador de imágenes.

Traduce los datos del formulario de publicación a un prompt de
fotografía inmobiliaria. Es determinístico: misma entrada, mismo prompt.
"""

from typing import Iterable, Union

from dealhunter.config import SERVED_COUNTRY
from dealhunter.models import Category

# Sujeto de la foto por tipo de propiedad
CATEGORY_SUBJECT = {
    Category.VACATION: "cozy vacation apartment with a warm, inviting living area",
    Category.SUITE: "luxury boutique hotel suite with elegant furnishings",
    Category.PENTHOUSE: "high-rise penthouse with panoramic city views and a rooftop terrace",
    Category.VILLA: "private villa with lush gardens and a grand facade",
}

# Amenity -> detalle visual. WiFi y pet friendly no tienen representación visual.
AMENITY_VISUALS = {
    "pool": "a sparkling outdoor infinity pool",
    "jacuzzi": "a private jacuzzi on the terrace",
    "free_parking": "a private parking area",
    "equipped_kitchen": "a gourmet open-plan kitchen with marble countertops",
    "bbq": "an outdoor BBQ and dining area",
}

# Etiquetas del formulario (hebreo) -> clave de amenity
AMENITY_LABELS = {
    "pool": "בריכה",
    "jacuzzi": "ג'קוזי",
    "free_parking": "חניה חינם",
    "equipped_kitchen": "מטבח מאובזר",
    "bbq": "מנגל",
    "wifi": "WiFi",
    "pet_friendly": "ידידותי לחיות מחמד",
}

_LABEL_TO_KEY = {label: key for key, label in AMENITY_LABELS.items()}

STYLE_PREAMBLE = (
    "Professional architectural real-estate photography, "
    "ultra-wide angle lens, photorealistic HDR, golden hour warm lighting,"
)

STYLE_CLOSING = (
    "Immaculate interior and exterior, no people, no text overlays, "
    "Architectural Digest quality, sharp focus throughout, "
    "16:9 landscape composition, neutral color palette."
)


def amenity_key(amenity: str) -> str:
    """Acepta la clave o la etiqueta del formulario y devuelve la clave."""
    value = amenity.strip()
    return _LABEL_TO_KEY.get(value, value)


def _feature_clause(amenities: Iterable[str]) -> str:
    details = [
        AMENITY_VISUALS[key]
        for key in (amenity_key(a) for a in amenities)
        if key in AMENITY_VISUALS
    ]
    if not details:
        return ""
    return f"The property features {', '.join(details)}."


def build_image_prompt(
    category: Union[Category, str],
    location: str,
    description: str = "",
    amenities: Iterable[str] = (),
) -> str:
    """
    Construye el prompt para una foto fotorrealista del deal.

    Args:
        category: Tipo de propiedad
        location: Ciudad o región (si está vacía se usa solo el país)
        description: Descripción libre (no se incluye para evitar que
            el generador derive a estilos ilustrativos)
        amenities: Claves o etiquetas de amenities; las que no tienen
            detalle visual se ignoran

    Returns:
        Prompt listo para el servicio de generación
    """
    subject = CATEGORY_SUBJECT[Category(category)]
    place = (location or "").strip()
    where = f"in {place}, {SERVED_COUNTRY}." if place else f"in {SERVED_COUNTRY}."

    parts = [
        STYLE_PREAMBLE,
        f"beautifully staged {subject}",
        where,
        _feature_clause(amenities),
        STYLE_CLOSING,
    ]
    return " ".join(part for part in parts if part)
