"""
Servicio de deals.

Orquesta la publicación (validación, imagen con IA, persistencia),
las ediciones/borrados del dueño y la carga de candidatos para la
admisión.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import structlog

from dealhunter.admission import admit
from dealhunter.database import DealRepository
from dealhunter.deals.catalog import load_seed_deals
from dealhunter.deals.validation import validate_submission
from dealhunter.imagery import (
    ImageGenerator,
    build_image_prompt,
    fallback_image,
    location_image,
)
from dealhunter.models import AdmissionResult, Listing, RawListing, StoredDeal

logger = structlog.get_logger()


class DealNotFoundError(LookupError):
    """El deal no existe o pertenece a otro usuario."""


@dataclass
class Catalog:
    """Resultado de admisión + datos extra de los deals publicados."""

    result: AdmissionResult
    stored: dict[int, StoredDeal] = field(default_factory=dict)

    def image_for(self, listing: Listing) -> str:
        """Imagen propia del deal, o un paisaje de su ubicación."""
        deal = self.stored.get(listing.id)
        if deal is not None and deal.image_url:
            return deal.image_url
        return location_image(listing.location)

    def amenities_by_id(self) -> dict[int, list[str]]:
        return {deal_id: deal.amenities for deal_id, deal in self.stored.items()}


class DealService:
    """Casos de uso sobre deals publicados y catálogo."""

    def __init__(
        self,
        repository: DealRepository,
        image_generator: Optional[ImageGenerator] = None,
        seed_deals: Optional[list[RawListing]] = None,
    ):
        self.repository = repository
        self.image_generator = image_generator
        self._seed_deals = seed_deals

    @property
    def seed_deals(self) -> list[RawListing]:
        if self._seed_deals is None:
            self._seed_deals = load_seed_deals()
        return self._seed_deals

    def load_candidates(
        self, stored: Optional[list[StoredDeal]] = None
    ) -> list[RawListing]:
        """Catálogo semilla + deals de la base, con forma de RawListing."""
        if stored is None:
            stored = self.repository.list_all()
        return list(self.seed_deals) + [deal.to_raw_listing() for deal in stored]

    def catalog(self) -> Catalog:
        """Corre la admisión sobre todos los candidatos actuales."""
        stored = self.repository.list_all()
        result = admit(self.load_candidates(stored))
        return Catalog(result=result, stored={deal.id: deal for deal in stored})

    def admitted(self) -> AdmissionResult:
        return self.catalog().result

    def owned_by(self, owner_id: str) -> list[StoredDeal]:
        """Deals publicados por el usuario (sin pasar por admisión)."""
        return self.repository.list_by_owner(owner_id)

    async def _image_for(self, submission) -> str:
        fallback = fallback_image(submission.category)
        if self.image_generator is None:
            logger.info("Sin generador de imágenes, usando fallback")
            return fallback

        prompt = build_image_prompt(
            submission.category,
            submission.location,
            submission.description,
            submission.amenities,
        )
        try:
            image_url = await self.image_generator.generate_and_store(prompt)
        except Exception as e:
            # La publicación nunca se bloquea por la imagen
            logger.error(
                "Falló la generación de imagen, usando fallback",
                category=submission.category.value,
                error=str(e),
            )
            return fallback

        logger.info("Imagen IA guardada", url=image_url)
        return image_url

    async def publish(self, owner_id: str, payload: Mapping[str, Any]) -> StoredDeal:
        """
        Publica un deal nuevo a nombre del usuario.

        Raises:
            SubmissionError: si el payload no pasa la validación
        """
        submission = validate_submission(payload)
        image_url = submission.image_url or await self._image_for(submission)
        # El cliente de Supabase es bloqueante
        return await asyncio.to_thread(
            self.repository.create, owner_id, submission, image_url=image_url
        )

    def update(
        self, owner_id: str, deal_id: int, payload: Mapping[str, Any]
    ) -> StoredDeal:
        """
        Edita un deal del usuario.

        Raises:
            SubmissionError: si el payload no pasa la validación
            DealNotFoundError: si no existe o es de otro usuario
        """
        submission = validate_submission(payload)
        deal = self.repository.update_owned(owner_id, deal_id, submission)
        if deal is None:
            raise DealNotFoundError(deal_id)
        return deal

    def delete(self, owner_id: str, deal_id: int) -> None:
        """
        Borra un deal del usuario.

        Raises:
            DealNotFoundError: si no se borró ninguna fila
        """
        if not self.repository.delete_owned(owner_id, deal_id):
            raise DealNotFoundError(deal_id)
