"""
Acceso a Supabase para las lecturas del matching.

Traduce las fallas de transporte y de PostgREST a StoreUnavailableError,
la única excepción que los repositorios reintentan y la API expone.
"""

from functools import lru_cache

import httpx
import structlog
from postgrest.exceptions import APIError
from supabase import create_client, Client

from gigmatch.config import get_settings

logger = structlog.get_logger()


class StoreUnavailableError(Exception):
    """El store no respondió o rechazó la consulta."""


class SupabaseClient:
    """Lecturas sobre tablas de Supabase con errores normalizados."""

    def __init__(self, client: Client):
        self._client = client

    def table(self, name: str):
        """Query builder de una tabla."""
        return self._client.table(name)

    def fetch(self, query, table: str) -> list[dict]:
        """
        Ejecuta un query builder y devuelve las filas.

        Raises:
            StoreUnavailableError: Falla de red o error de PostgREST
        """
        try:
            return query.execute().data or []
        except (httpx.HTTPError, APIError) as e:
            logger.error("Error leyendo del store", table=table, error=str(e))
            raise StoreUnavailableError(f"{table}: {e}") from e


@lru_cache
def get_supabase_client() -> SupabaseClient:
    """
    Construye el cliente a partir de settings (cacheado).

    Raises:
        ValueError: Si faltan SUPABASE_URL o SUPABASE_KEY
    """
    settings = get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        raise ValueError(
            "SUPABASE_URL y SUPABASE_KEY son requeridos para leer jobs y freelancers."
        )

    key = settings.supabase_service_key or settings.supabase_key
    logger.info("Conectando a Supabase", url=settings.supabase_url)
    return SupabaseClient(create_client(settings.supabase_url, key))
