"""
Repositorios de lectura en Supabase.

Cada repositorio maneja una tabla/entidad específica. Solo las fallas
del store se reintentan; si persisten, la excepción se propaga.
"""

from typing import Optional

import structlog
from pydantic import ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from gigmatch.config import get_settings
from gigmatch.database.supabase_client import (
    get_supabase_client,
    StoreUnavailableError,
    SupabaseClient,
)
from gigmatch.models import FreelancerDescriptor, JobDescriptor

logger = structlog.get_logger()

_store_retry = retry(
    retry=retry_if_exception_type(StoreUnavailableError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
    reraise=True,
)


class BaseRepository:
    """Clase base para repositorios."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client


class JobRepository(BaseRepository):
    """Repositorio para jobs publicados."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        super().__init__(client)
        self.table_name = get_settings().jobs_table

    @_store_retry
    def _fetch_job_rows(self, job_id: str) -> list[dict]:
        query = (
            self.client.table(self.table_name)
            .select("id, title, requiredSkills")
            .eq("id", job_id)
            .limit(1)
        )
        return self.client.fetch(query, self.table_name)

    def find_job(self, job_id: str) -> Optional[JobDescriptor]:
        """Obtiene un job por su ID, o None si no existe."""
        rows = self._fetch_job_rows(job_id)
        if not rows:
            return None
        return JobDescriptor.model_validate(rows[0])


class FreelancerRepository(BaseRepository):
    """Repositorio para freelancers (usuarios con skills)."""

    SELECT = (
        "id, username, fullName, profileImage, skills, portfolio, reviews(rating)"
    )

    def __init__(self, client: Optional[SupabaseClient] = None):
        super().__init__(client)
        self.table_name = get_settings().users_table

    @_store_retry
    def _fetch_rows_with_skills(self) -> list[dict]:
        query = (
            self.client.table(self.table_name)
            .select(self.SELECT)
            .not_.is_("skills", "null")
        )
        return self.client.fetch(query, self.table_name)

    def find_freelancers_with_any_skill(self) -> list[FreelancerDescriptor]:
        """
        Trae en una sola lectura todos los usuarios con al menos una skill.

        Las filas que no se pueden interpretar se descartan con un warning
        para que un registro roto no deje sin matches a todos los jobs.

        Returns:
            Lista de FreelancerDescriptor
        """
        rows = self._fetch_rows_with_skills()

        freelancers = []
        for row in rows:
            # skills = [] pasa el filtro del server; se descarta acá
            if not row.get("skills"):
                continue
            try:
                freelancers.append(FreelancerDescriptor.model_validate(row))
            except ValidationError as e:
                logger.warning(
                    "Freelancer descartado por datos inválidos",
                    freelancer_id=row.get("id"),
                    errors=e.error_count(),
                )

        logger.debug(
            "Freelancers con skills obtenidos",
            fetched=len(rows),
            with_skills=len(freelancers),
        )
        return freelancers
