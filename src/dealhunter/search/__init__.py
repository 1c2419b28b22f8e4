"""
Módulo de búsqueda asistida con IA.

Provee el asistente de búsqueda y la abstracción de proveedores
LLM (OpenAI/Gemini/Groq).
"""

from dealhunter.search.assistant import SearchAnswer, SearchAssistant
from dealhunter.search.llm_providers import (
    get_llm_provider,
    BaseLLMProvider,
    LLMResponse,
    OpenAIProvider,
    GeminiProvider,
    GroqProvider,
)

__all__ = [
    "SearchAnswer",
    "SearchAssistant",
    "get_llm_provider",
    "BaseLLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "GeminiProvider",
    "GroqProvider",
]
