"""
Generación de imágenes con OpenAI y persistencia en Storage.

Las URLs que devuelve DALL-E expiran en ~1 hora, así que la imagen
se descarga enseguida y se sube al bucket público.
"""

import asyncio
from typing import Optional, Union

import httpx
import structlog
from openai import AsyncOpenAI

from dealhunter.config import get_settings
from dealhunter.imagery.storage import ObjectStorage, build_object_path
from dealhunter.models import Category

logger = structlog.get_logger()

_WM = "https://upload.wikimedia.org/wikipedia/commons/thumb"

# Imágenes de respaldo por categoría (Wikimedia, no expiran)
FALLBACK_BY_CATEGORY = {
    Category.VACATION: (
        f"{_WM}/9/9e/Central_Tel_Aviv_beaches_and_Jaffa_on_the_background_%289869221525%29.jpg/"
        "1280px-Central_Tel_Aviv_beaches_and_Jaffa_on_the_background_%289869221525%29.jpg"
    ),
    Category.SUITE: (
        f"{_WM}/f/f5/Skyline_of_Tel_Aviv_by_night.jpg/1280px-Skyline_of_Tel_Aviv_by_night.jpg"
    ),
    Category.PENTHOUSE: (
        f"{_WM}/6/6d/Israel_Tel_Aviv_Skyline_%2834714425090%29.jpg/"
        "1280px-Israel_Tel_Aviv_Skyline_%2834714425090%29.jpg"
    ),
    Category.VILLA: (
        f"{_WM}/7/79/Israel_Eilat_-_panoramio_%2812%29.jpg/"
        "1280px-Israel_Eilat_-_panoramio_%2812%29.jpg"
    ),
}


class ImageGenerationError(RuntimeError):
    """La imagen no se pudo generar, descargar o guardar."""


def fallback_image(category: Union[Category, str]) -> str:
    """Imagen de respaldo para una categoría."""
    return FALLBACK_BY_CATEGORY[Category(category)]


class ImageGenerator:
    """Genera una imagen desde un prompt y la guarda en Storage."""

    def __init__(
        self,
        storage: ObjectStorage,
        client: Optional[AsyncOpenAI] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.model = settings.image_model
        self.size = settings.image_size
        self.quality = settings.image_quality
        self.timeout = settings.image_timeout
        self.storage = storage

        if client is None:
            if not settings.openai_api_key:
                raise ValueError("OPENAI_API_KEY no configurada")
            # Un solo intento: el timeout es el presupuesto total de la generación
            client = AsyncOpenAI(
                api_key=settings.openai_api_key, timeout=self.timeout, max_retries=0
            )
        self.client = client
        self._http_client = http_client

    async def _generate_temp_url(self, prompt: str) -> str:
        response = await self.client.images.generate(
            model=self.model,
            prompt=prompt,
            n=1,
            size=self.size,
            quality=self.quality,
            response_format="url",
        )
        temp_url = response.data[0].url if response.data else None
        if not temp_url:
            raise ImageGenerationError("Respuesta de generación sin URL")
        return temp_url

    async def _download(self, url: str) -> bytes:
        if self._http_client is not None:
            response = await self._http_client.get(url)
        else:
            async with httpx.AsyncClient(timeout=30.0, follow_redirects=True) as client:
                response = await client.get(url)

        if not response.is_success:
            raise ImageGenerationError(
                f"No se pudo descargar la imagen generada: HTTP {response.status_code}"
            )
        return response.content

    async def generate_and_store(self, prompt: str) -> str:
        """
        Genera la imagen y devuelve su URL pública permanente.

        Raises:
            ImageGenerationError: si la generación no devuelve URL o la
                descarga falla. Otros errores del SDK se propagan.
        """
        temp_url = await self._generate_temp_url(prompt)
        logger.debug("Imagen generada", model=self.model, size=self.size)

        data = await self._download(temp_url)
        path = build_object_path("png")
        return await asyncio.to_thread(self.storage.upload, path, data, "image/png")
