"""
Validación server-side de deals publicados por usuarios.

Usa la misma tabla de presupuestos y la misma regla de deep link que
la admisión.
"""

from typing import Any, Mapping

from dealhunter.admission.budget import submission_price_error
from dealhunter.admission.deep_link import is_valid_deep_link
from dealhunter.models import Category, DealSubmission, parse_amount


class SubmissionError(ValueError):
    """Payload de publicación inválido. El mensaje se muestra al cliente."""


def _text(payload: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return str(value).strip()
    return ""


def validate_submission(payload: Mapping[str, Any]) -> DealSubmission:
    """
    Valida el formulario de publicación/edición.

    Acepta claves snake_case y las camelCase del formulario
    (hostName, hostPhone, hostEmail).

    Raises:
        SubmissionError: si faltan campos, si la categoría no existe,
            si el precio no está entre 1 y el techo de la categoría
            o si la URL no es un deep link https://
    """
    category = _text(payload, "category")
    location = _text(payload, "location")
    host_phone = _text(payload, "host_phone", "hostPhone")

    if not category or not location or not host_phone:
        raise SubmissionError("Missing required fields")

    try:
        category_value = Category(category)
    except ValueError:
        raise SubmissionError("Invalid category") from None

    price = parse_amount(payload.get("price_per_night", payload.get("price_per_night_ils")))
    error = submission_price_error(category_value, price)
    if error:
        raise SubmissionError(error)

    url = _text(payload, "url")
    if not is_valid_deep_link(url):
        raise SubmissionError("Invalid deep link")

    amenities = payload.get("amenities")
    if not isinstance(amenities, list):
        amenities = []

    return DealSubmission(
        category=category_value,
        property_name=_text(payload, "property_name"),
        location=location,
        price_per_night=price,
        description=_text(payload, "description"),
        url=url,
        host_name=_text(payload, "host_name", "hostName"),
        host_phone=host_phone,
        host_email=_text(payload, "host_email", "hostEmail") or None,
        amenities=[str(a) for a in amenities if a],
        image_url=_text(payload, "image_url") or None,
    )
