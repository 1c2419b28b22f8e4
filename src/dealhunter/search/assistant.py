"""
Búsqueda asistida por IA.

Rankea y explica deals YA admitidos según una consulta libre.
Nunca reemplaza las reglas de admisión: solo puede devolver IDs
que estén en el set aceptado.
"""

import json
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

import structlog
from tenacity import retry, stop_after_attempt, wait_exponential

from dealhunter.config import CURRENCY_SYMBOL
from dealhunter.models import Listing
from dealhunter.search.llm_providers import BaseLLMProvider, get_llm_provider

logger = structlog.get_logger()

DEFAULT_MESSAGE = "Esto es lo que encontré:"

SEARCH_SYSTEM_PROMPT = """Sos el asistente de búsqueda de "Deal Hunter", un sitio de deals de alojamiento en Israel.
Dada la lista de deals disponibles, elegí los que mejor responden al pedido del usuario.

Reglas:
- Respondé en el mismo idioma de la consulta, en tono amable y breve (1-2 frases).
- Usá SOLO IDs de la lista. No inventes deals.
- Si ningún deal encaja, decilo con amabilidad y devolvé una lista vacía.
- Responder SOLO en JSON válido con esta estructura exacta:
{{"message": "...", "ids": [1, 2, 3]}}

DEALS DISPONIBLES:
{deals_context}"""


@dataclass
class SearchAnswer:
    """Respuesta de la búsqueda asistida."""

    message: str
    ids: list[int] = field(default_factory=list)


def _listing_line(listing: Listing, amenities: Sequence[str]) -> str:
    amenity_text = ", ".join(amenities) if amenities else "sin amenities"
    return (
        f"ID:{listing.id} | {listing.category.value} | {listing.property_name} | "
        f"{listing.location} | {listing.price_per_night}{CURRENCY_SYMBOL} | "
        f"amenities: {amenity_text} | {listing.description}"
    )


def _strip_fences(text: str) -> str:
    # A veces la respuesta viene envuelta en markdown
    if text.startswith("```"):
        parts = text.split("```")
        if len(parts) >= 2:
            text = parts[1]
            if text.startswith("json"):
                text = text[4:]
    return text.strip()


class SearchAssistant:
    """Ranking + explicación de deals admitidos con un LLM."""

    def __init__(self, provider: Optional[BaseLLMProvider] = None):
        self._provider = provider or get_llm_provider()

    def build_context(
        self,
        listings: Sequence[Listing],
        amenities_by_id: Optional[Mapping[int, Sequence[str]]] = None,
    ) -> str:
        """Una línea compacta por deal para el prompt."""
        amenities_by_id = amenities_by_id or {}
        return "\n".join(
            _listing_line(listing, amenities_by_id.get(listing.id, ()))
            for listing in listings
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def _ask(self, system_prompt: str, query: str) -> str:
        response = await self._provider.generate(
            system_prompt=system_prompt,
            user_prompt=query,
            temperature=0.4,
            max_tokens=400,
        )
        return response.text

    def parse_answer(self, raw_text: str, listings: Sequence[Listing]) -> SearchAnswer:
        """
        Parsea la respuesta del LLM y descarta IDs fuera del set admitido.

        Una respuesta que no es JSON válido devuelve el mensaje por
        defecto sin resultados.
        """
        try:
            data = json.loads(_strip_fences(raw_text))
        except json.JSONDecodeError as e:
            logger.warning("Respuesta de búsqueda no es JSON", error=str(e))
            return SearchAnswer(message=DEFAULT_MESSAGE)

        if not isinstance(data, dict):
            return SearchAnswer(message=DEFAULT_MESSAGE)

        message = data.get("message")
        if not isinstance(message, str) or not message.strip():
            message = DEFAULT_MESSAGE

        admitted_ids = {listing.id for listing in listings}
        ids: list[int] = []
        raw_ids = data.get("ids")
        for value in raw_ids if isinstance(raw_ids, list) else []:
            try:
                listing_id = int(value)
            except (TypeError, ValueError):
                continue
            if listing_id in admitted_ids and listing_id not in ids:
                ids.append(listing_id)

        return SearchAnswer(message=message.strip(), ids=ids)

    async def search(
        self,
        query: str,
        listings: Sequence[Listing],
        amenities_by_id: Optional[Mapping[int, Sequence[str]]] = None,
    ) -> SearchAnswer:
        """
        Busca deals para una consulta libre.

        Args:
            query: Pedido del usuario
            listings: Deals ya admitidos
            amenities_by_id: Amenities conocidas por deal (opcional)

        Returns:
            SearchAnswer con mensaje e IDs ordenados por relevancia

        Raises:
            ValueError: si la consulta o la lista de deals están vacías
        """
        if not query or not query.strip() or not listings:
            raise ValueError("Missing query or deals")

        system_prompt = SEARCH_SYSTEM_PROMPT.format(
            deals_context=self.build_context(listings, amenities_by_id)
        )

        raw_text = await self._ask(system_prompt, query.strip())
        answer = self.parse_answer(raw_text, listings)

        logger.info(
            "Búsqueda completada",
            query=query.strip()[:80],
            candidates=len(listings),
            results=len(answer.ids),
        )
        return answer
