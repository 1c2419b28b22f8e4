"""
Tabla de presupuestos por categoría.

Única fuente del techo por noche: la usan tanto el pipeline de
admisión como la validación de deals publicados por usuarios.
"""

from types import MappingProxyType
from typing import Optional, Union

from dealhunter.config import CURRENCY_SYMBOL
from dealhunter.models.raw_listing import Amount, Category


class UnknownCategoryError(KeyError):
    """Se pidió el techo de una categoría fuera de la enumeración."""


# Precio máximo por noche (ILS) por categoría
BUDGET_LIMITS = MappingProxyType({
    Category.VACATION: 450,
    Category.SUITE: 450,
    Category.PENTHOUSE: 990,
    Category.VILLA: 1990,
})


def budget_ceiling(category: Union[Category, str]) -> int:
    """
    Devuelve el techo por noche de una categoría.

    Raises:
        UnknownCategoryError: si la categoría no existe. Nunca se usa
            un default, un techo inventado dejaría pasar deals caros.
    """
    try:
        return BUDGET_LIMITS[Category(category)]
    except (ValueError, KeyError):
        raise UnknownCategoryError(category) from None


def exceeds_budget(category: Union[Category, str], price: Amount) -> bool:
    """True si el precio supera el techo, aunque sea por una unidad."""
    return price > budget_ceiling(category)


def submission_price_error(
    category: Union[Category, str], price: Optional[Amount]
) -> Optional[str]:
    """
    Valida el precio de un formulario de publicación.

    Returns:
        Mensaje de error, o None si el precio está entre 1 y el techo.
    """
    limit = budget_ceiling(category)
    if price is None or price <= 0 or price > limit:
        return f"Price must be between 1 and {limit} {CURRENCY_SYMBOL}"
    return None
