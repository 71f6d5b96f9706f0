"""
Punto de entrada del matching: trae datos del store y rankea.

Un request hace exactamente dos lecturas (el job y la población
de freelancers) y después calcula todo en memoria.
"""

from typing import Optional

import structlog

from gigmatch.config import get_settings
from gigmatch.database import FreelancerRepository, JobRepository
from gigmatch.matching.engine import RankedMatch, rank_candidates

logger = structlog.get_logger()


class MatchingService:
    """
    Orquesta fetch -> score -> sort -> truncate.

    Los repositorios se pueden inyectar; si no, se construyen
    contra Supabase. Los errores del store se propagan tal cual.
    """

    def __init__(
        self,
        job_repo: Optional[JobRepository] = None,
        freelancer_repo: Optional[FreelancerRepository] = None,
    ):
        self.settings = get_settings()
        self.job_repo = job_repo or JobRepository()
        self.freelancer_repo = freelancer_repo or FreelancerRepository()

    def get_top_matches(
        self, job_id: str, limit: Optional[int] = None
    ) -> list[RankedMatch]:
        """
        Devuelve los mejores freelancers para un job.

        Args:
            job_id: ID del job
            limit: Máximo de resultados (default de settings)

        Returns:
            Lista de RankedMatch ordenada por score; vacía si el job no existe
        """
        if limit is None:
            limit = self.settings.default_match_limit

        job = self.job_repo.find_job(job_id)
        if job is None:
            logger.info("Job inexistente, sin matches", job_id=job_id)
            return []

        freelancers = self.freelancer_repo.find_freelancers_with_any_skill()
        matches = rank_candidates(job, freelancers, limit)

        logger.info(
            "Matches calculados",
            job_id=job_id,
            required_skills=len(job.normalized_skills),
            candidates=len(freelancers),
            returned=len(matches),
        )
        return matches
