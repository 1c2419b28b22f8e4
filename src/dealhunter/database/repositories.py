"""
Repositorios para operaciones CRUD en Supabase.

Cada repositorio maneja una tabla/entidad específica.
"""

from typing import Optional

import structlog

from dealhunter.database.supabase_client import get_supabase_client, SupabaseClient
from dealhunter.models import DealSubmission, StoredDeal

logger = structlog.get_logger()


class BaseRepository:
    """Clase base para repositorios."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client


class DealRepository(BaseRepository):
    """Repositorio para deals publicados por usuarios (tabla deals)."""

    TABLE = "deals"

    def create(
        self,
        owner_id: str,
        submission: DealSubmission,
        image_url: Optional[str] = None,
    ) -> StoredDeal:
        """
        Inserta un deal nuevo a nombre del dueño.

        Returns:
            El deal insertado con su ID

        Raises:
            RuntimeError: si Supabase no devuelve la fila insertada
        """
        data = submission.to_db_dict()
        data["user_id"] = owner_id
        if image_url:
            data["image_url"] = image_url

        response = self.client.table(self.TABLE).insert(data).execute()
        if not response.data:
            logger.error("Insert de deal sin fila devuelta", owner_id=owner_id)
            raise RuntimeError("No se pudo guardar el deal")

        deal = StoredDeal.from_row(response.data[0])
        logger.info(
            "Deal creado",
            deal_id=deal.id,
            category=deal.category.value,
            owner_id=owner_id,
        )
        return deal

    def list_all(self) -> list[StoredDeal]:
        """Todos los deals, los más recientes primero."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [StoredDeal.from_row(row) for row in response.data or []]

    def list_by_owner(self, owner_id: str) -> list[StoredDeal]:
        """Deals publicados por un usuario."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", owner_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [StoredDeal.from_row(row) for row in response.data or []]

    def get_by_id(self, deal_id: int) -> Optional[StoredDeal]:
        """Obtiene un deal por su ID."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("id", deal_id)
            .limit(1)
            .execute()
        )
        return StoredDeal.from_row(response.data[0]) if response.data else None

    def update_owned(
        self, owner_id: str, deal_id: int, submission: DealSubmission
    ) -> Optional[StoredDeal]:
        """
        Actualiza un deal solo si pertenece al usuario.

        Returns:
            El deal actualizado, o None si no existe o es de otro usuario
        """
        response = (
            self.client.table(self.TABLE)
            .update(submission.to_db_dict())
            .eq("id", deal_id)
            .eq("user_id", owner_id)
            .execute()
        )
        if not response.data:
            return None

        logger.info("Deal actualizado", deal_id=deal_id, owner_id=owner_id)
        return StoredDeal.from_row(response.data[0])

    def delete_owned(self, owner_id: str, deal_id: int) -> bool:
        """Borra un deal del usuario. True si se borró alguna fila."""
        response = (
            self.client.table(self.TABLE)
            .delete()
            .eq("id", deal_id)
            .eq("user_id", owner_id)
            .execute()
        )
        deleted = bool(response.data)
        logger.info("Deal borrado", deal_id=deal_id, owner_id=owner_id, deleted=deleted)
        return deleted
