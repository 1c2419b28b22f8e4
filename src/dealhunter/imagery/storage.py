"""
Almacenamiento de imágenes en Supabase Storage.

Recibe bytes y devuelve una URL pública permanente.
"""

import secrets
import time
from typing import Optional

import structlog

from dealhunter.config import get_settings
from dealhunter.database.supabase_client import SupabaseClient, get_supabase_client

logger = structlog.get_logger()


def build_object_path(extension: str, prefix: str = "deals") -> str:
    """Nombre único tipo `deals/<timestamp>-<random>.<ext>`."""
    ext = (extension or "jpg").lstrip(".").lower()
    return f"{prefix}/{int(time.time() * 1000)}-{secrets.token_hex(6)}.{ext}"


class ObjectStorage:
    """Wrapper del bucket público de imágenes."""

    def __init__(
        self,
        client: Optional[SupabaseClient] = None,
        bucket: Optional[str] = None,
    ):
        self._client = client or get_supabase_client()
        self.bucket = bucket or get_settings().storage_bucket

    def upload(self, path: str, data: bytes, content_type: str) -> str:
        """
        Sube un archivo al bucket.

        Args:
            path: Ruta del objeto dentro del bucket
            data: Contenido binario
            content_type: MIME type (ej: image/png)

        Returns:
            URL pública del objeto
        """
        bucket = self._client.bucket(self.bucket)
        try:
            bucket.upload(path, data, {"content-type": content_type})
        except Exception as e:
            logger.error(
                "Error subiendo imagen",
                bucket=self.bucket,
                path=path,
                error=str(e),
            )
            raise

        url = bucket.get_public_url(path)
        logger.info("Imagen subida", bucket=self.bucket, path=path, size=len(data))
        return url
