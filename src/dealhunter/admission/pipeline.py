"""
Pipeline de admisión de deals.

Evalúa cada candidato contra las reglas, en este orden:
1. Geografía: solo deals dentro del país servido
2. Presupuesto: precio <= techo de la categoría (sin tolerancia)
3. Deep link: URL absoluta https://

Solo se registra la primera regla que falla; el candidato se descarta
y se sigue con el próximo. El orden es parte del contrato: cambia
qué categoría de rechazo se contabiliza.
"""

import math
from typing import Iterable, Optional

import structlog

from dealhunter.admission.budget import budget_ceiling, exceeds_budget
from dealhunter.admission.deep_link import is_valid_deep_link
from dealhunter.config import CURRENCY_SYMBOL, SERVED_COUNTRY
from dealhunter.models import (
    AdmissionResult,
    Listing,
    RawListing,
    RejectionRecord,
    RejectionType,
)

logger = structlog.get_logger()

URL_PREVIEW_LENGTH = 35


def _format_amount(value) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _url_preview(url: str) -> str:
    if not url:
        return "faltante"
    suffix = "…" if len(url) > URL_PREVIEW_LENGTH else ""
    return f'"{url[:URL_PREVIEW_LENGTH]}{suffix}"'


def _check_location(deal: RawListing) -> Optional[RejectionRecord]:
    if deal.is_domestic:
        return None
    return RejectionRecord(
        name=deal.property_name,
        reason=f"Propiedad fuera de {SERVED_COUNTRY} ({deal.location})",
        type=RejectionType.LOCATION,
    )


def _check_budget(deal: RawListing) -> Optional[RejectionRecord]:
    limit = budget_ceiling(deal.category)
    price = deal.price_per_night

    # Precio faltante o no parseable: se rechaza, nunca se asume válido
    if price is None or not math.isfinite(price) or price < 0:
        return RejectionRecord(
            name=deal.property_name,
            reason=f"Precio faltante o inválido (máximo {CURRENCY_SYMBOL}{limit})",
            type=RejectionType.BUDGET,
        )

    if not exceeds_budget(deal.category, price):
        return None

    return RejectionRecord(
        name=deal.property_name,
        reason=(
            f"{CURRENCY_SYMBOL}{_format_amount(price)} > máximo "
            f"{CURRENCY_SYMBOL}{limit} (+{_format_amount(price - limit)} {CURRENCY_SYMBOL})"
        ),
        type=RejectionType.BUDGET,
    )


def _check_url(deal: RawListing) -> Optional[RejectionRecord]:
    if is_valid_deep_link(deal.url):
        return None
    return RejectionRecord(
        name=deal.property_name,
        reason=f"Deep link inválido: URL {_url_preview(deal.url)}",
        type=RejectionType.URL,
    )


# Orden de evaluación
RULES = (_check_location, _check_budget, _check_url)


def _to_listing(deal: RawListing) -> Listing:
    """Copia el candidato a la forma limpia, sin campos internos."""
    return Listing(
        id=deal.id,
        category=deal.category,
        property_name=deal.property_name,
        location=deal.location,
        price_per_night=deal.price_per_night,
        description=deal.description,
        url=deal.url,
    )


def admit(candidates: Iterable[RawListing]) -> AdmissionResult:
    """
    Separa candidatos en aceptados y rechazados.

    Función pura: no hace I/O ni muta la entrada. Para la misma
    entrada devuelve siempre el mismo resultado, en el mismo orden.

    Args:
        candidates: RawListings a evaluar

    Returns:
        AdmissionResult con los aceptados (en orden de entrada),
        los rechazos (en orden de aparición) y los conteos por tipo

    Raises:
        UnknownCategoryError: si un candidato trae una categoría sin techo
    """
    accepted: list[Listing] = []
    rejections: list[RejectionRecord] = []
    counts = {rejection_type: 0 for rejection_type in RejectionType}

    for deal in candidates:
        rejection = None
        for rule in RULES:
            rejection = rule(deal)
            if rejection is not None:
                break

        if rejection is not None:
            counts[rejection.type] += 1
            rejections.append(rejection)
            continue

        accepted.append(_to_listing(deal))

    result = AdmissionResult(
        accepted=tuple(accepted),
        rejections=tuple(rejections),
        rejected_by_location=counts[RejectionType.LOCATION],
        rejected_by_budget=counts[RejectionType.BUDGET],
        rejected_by_url=counts[RejectionType.URL],
    )

    logger.debug(
        "Admisión completada",
        accepted=len(result.accepted),
        rejected=result.rejected_count,
        by_location=result.rejected_by_location,
        by_budget=result.rejected_by_budget,
        by_url=result.rejected_by_url,
    )

    return result
