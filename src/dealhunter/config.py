"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> dealhunter/ -> src/ -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase
    supabase_url: str = Field(..., description="URL del proyecto Supabase")
    supabase_key: str = Field(..., description="Anon key de Supabase")
    supabase_service_key: Optional[str] = Field(
        None, description="Service role key para operaciones admin"
    )
    storage_bucket: str = Field(
        "deal-images", description="Bucket público de Supabase Storage para imágenes"
    )

    # LLM Provider (búsqueda asistida)
    llm_provider: str = Field(
        "openai",
        description="Proveedor de LLM a usar: 'openai', 'gemini' o 'groq'"
    )

    # OpenAI
    openai_api_key: Optional[str] = Field(None, description="API key de OpenAI")
    openai_model: str = Field("gpt-4o-mini", description="Modelo de chat de OpenAI")

    # Gemini
    gemini_api_key: Optional[str] = Field(None, description="API key de Google Gemini")
    gemini_model: str = Field("gemini-2.0-flash", description="Modelo de Gemini a usar")

    # Groq
    groq_api_key: Optional[str] = Field(None, description="API key de Groq")
    groq_model: str = Field(
        "llama-3.1-8b-instant",
        description="Modelo de Groq a usar (llama-3.1-8b-instant, llama-3.3-70b-versatile)"
    )

    # Generación de imágenes
    image_model: str = Field("dall-e-3", description="Modelo de generación de imágenes")
    image_size: str = Field("1792x1024", description="Tamaño de la imagen generada")
    image_quality: str = Field("standard", description="Calidad: standard o hd")
    image_timeout: float = Field(
        50.0, description="Timeout de generación (segundos), deja margen para el upload"
    )

    # Chequeo de links
    liveness_batch_size: int = Field(
        8, ge=1, description="Requests concurrentes por batch"
    )
    liveness_timeout: float = Field(8.0, gt=0, description="Timeout por request (segundos)")
    cron_secret: Optional[str] = Field(
        None, description="Bearer secret para el endpoint de cron"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema
SERVED_COUNTRY = "Israel"

CURRENCY_SYMBOL = "₪"
