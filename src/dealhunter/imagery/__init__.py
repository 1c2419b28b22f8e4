"""
Módulo de imágenes.

Prompts para generación con IA, generación + almacenamiento,
e imágenes de paisaje por ubicación.
"""

from dealhunter.imagery.prompt import (
    AMENITY_LABELS,
    AMENITY_VISUALS,
    CATEGORY_SUBJECT,
    amenity_key,
    build_image_prompt,
)
from dealhunter.imagery.location_images import location_image
from dealhunter.imagery.storage import ObjectStorage, build_object_path
from dealhunter.imagery.generator import (
    FALLBACK_BY_CATEGORY,
    ImageGenerationError,
    ImageGenerator,
    fallback_image,
)

__all__ = [
    # Prompts
    "AMENITY_LABELS",
    "AMENITY_VISUALS",
    "CATEGORY_SUBJECT",
    "amenity_key",
    "build_image_prompt",
    # Paisajes
    "location_image",
    # Generación y storage
    "ObjectStorage",
    "build_object_path",
    "FALLBACK_BY_CATEGORY",
    "ImageGenerationError",
    "ImageGenerator",
    "fallback_image",
]
