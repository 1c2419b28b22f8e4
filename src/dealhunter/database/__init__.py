"""
Módulo de base de datos.

Provee acceso a Supabase (tablas y Auth) y operaciones CRUD.
"""

from dealhunter.database.supabase_client import get_supabase_client, SupabaseClient
from dealhunter.database.repositories import DealRepository
from dealhunter.database.auth import AuthService, AuthenticationError

__all__ = [
    "get_supabase_client",
    "SupabaseClient",
    "DealRepository",
    "AuthService",
    "AuthenticationError",
]
