"""
Cliente de Supabase.

Un único punto de acceso a las tres superficies que usa el servicio:
la tabla `deals`, Auth (validación de sesiones) y Storage (fotos).
"""

from functools import lru_cache

import structlog
from supabase import create_client, Client

from dealhunter.config import get_settings

logger = structlog.get_logger()


class SupabaseClient:
    """Wrapper fino sobre `supabase.Client`."""

    def __init__(self, client: Client):
        self._client = client

    @property
    def client(self) -> Client:
        return self._client

    def table(self, name: str):
        """Query builder de una tabla."""
        return self._client.table(name)

    def bucket(self, name: str):
        """Operaciones sobre un bucket de Storage."""
        return self._client.storage.from_(name)

    def get_user(self, access_token: str):
        """Resuelve un JWT de sesión; Supabase lanza si es inválido o expiró."""
        return self._client.auth.get_user(access_token)


@lru_cache
def get_supabase_client() -> SupabaseClient:
    """
    Cliente compartido por el proceso.

    Del lado servidor se prefiere la service key: los chequeos de
    dueño los hace el repositorio filtrando por `user_id`.
    """
    settings = get_settings()
    key = settings.supabase_service_key or settings.supabase_key

    client = create_client(settings.supabase_url, key)
    logger.info(
        "Cliente de Supabase inicializado",
        url=settings.supabase_url,
        service_role=settings.supabase_service_key is not None,
    )
    return SupabaseClient(client)
