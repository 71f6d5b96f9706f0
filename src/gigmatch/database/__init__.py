"""
Módulo de base de datos.

Provee acceso de lectura a Supabase para jobs y freelancers.
"""

from gigmatch.database.supabase_client import (
    get_supabase_client,
    StoreUnavailableError,
    SupabaseClient,
)
from gigmatch.database.repositories import (
    FreelancerRepository,
    JobRepository,
)

__all__ = [
    "get_supabase_client",
    "StoreUnavailableError",
    "SupabaseClient",
    "FreelancerRepository",
    "JobRepository",
]
