"""
Dependencias de FastAPI.

Cada colaborador externo se resuelve acá, así los tests pueden
reemplazarlos con `app.dependency_overrides`.
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, HTTPException

from dealhunter.config import get_settings
from dealhunter.database import AuthenticationError, AuthService, DealRepository
from dealhunter.deals import DealService
from dealhunter.imagery import ImageGenerator, ObjectStorage
from dealhunter.liveness import LivenessChecker
from dealhunter.search import SearchAssistant

logger = structlog.get_logger()


def get_object_storage() -> ObjectStorage:
    return ObjectStorage()


def get_deal_service(storage: ObjectStorage = Depends(get_object_storage)) -> DealService:
    """Servicio de deals; sin OPENAI_API_KEY publica con imagen de respaldo."""
    settings = get_settings()
    generator = ImageGenerator(storage) if settings.openai_api_key else None
    return DealService(DealRepository(), image_generator=generator)


def get_auth_service() -> AuthService:
    return AuthService()


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_owner_id(
    authorization: Optional[str] = Header(None),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    """ID del usuario autenticado (401 si no hay sesión válida)."""
    try:
        return auth.owner_id(_bearer_token(authorization))
    except AuthenticationError:
        raise HTTPException(status_code=401, detail="Unauthorized")


def get_search_assistant() -> SearchAssistant:
    """Asistente de búsqueda (503 si no hay proveedor LLM configurado)."""
    try:
        return SearchAssistant()
    except ValueError as e:
        logger.warning("Búsqueda IA no configurada", error=str(e))
        raise HTTPException(status_code=503, detail="AI search not configured")


def get_liveness_checker() -> LivenessChecker:
    return LivenessChecker()


def require_cron_secret(authorization: Optional[str] = Header(None)) -> None:
    """Solo el cron (o llamadas manuales con el secret) puede disparar el chequeo."""
    secret = get_settings().cron_secret
    if not secret or authorization != f"Bearer {secret}":
        raise HTTPException(status_code=401, detail="Unauthorized")
