"""
Autenticación con Supabase Auth.

Resuelve el token de sesión a la identidad del dueño. El resto del
sistema solo recibe el `owner_id` ya verificado.
"""

from typing import Optional

import structlog

from dealhunter.database.supabase_client import SupabaseClient, get_supabase_client

logger = structlog.get_logger()


class AuthenticationError(Exception):
    """Token ausente, inválido o expirado."""


class AuthService:
    """Valida sesiones emitidas por Supabase Auth."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    def owner_id(self, access_token: Optional[str]) -> str:
        """
        Devuelve el ID de usuario del token.

        Raises:
            AuthenticationError: si el token no es válido
        """
        if not access_token:
            raise AuthenticationError("Falta el token de sesión")

        try:
            response = self._client.get_user(access_token)
        except Exception as e:
            logger.warning("Token rechazado por Supabase", error=str(e))
            raise AuthenticationError("Sesión inválida") from e

        user = getattr(response, "user", None)
        if user is None or not getattr(user, "id", None):
            raise AuthenticationError("Sesión inválida")
        return str(user.id)
