"""
Motor de matching entre jobs y freelancers.

Implementa:
- Score explicable por freelancer (skills, experiencia, portfolio, reviews)
- Ranking top-N con desempate determinístico

Todo es cómputo puro sobre datos ya traídos del store.
"""

from dataclasses import dataclass
from typing import Sequence

from gigmatch.matching.scoring import (
    experience_score,
    portfolio_score,
    reviews_score,
    skill_coverage_score,
    to_percent,
    weighted_total,
)
from gigmatch.models import FreelancerDescriptor, JobDescriptor

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores en [0, 100] cuya suma ponderada da el total."""

    skills: float
    experience: float
    portfolio: float
    reviews: float

    def to_dict(self) -> dict:
        return {
            "skills": self.skills,
            "experience": self.experience,
            "portfolio": self.portfolio,
            "reviews": self.reviews,
        }


@dataclass(frozen=True)
class MatchResult:
    """Resultado de matching para un freelancer."""

    freelancer_id: str
    total_score: float  # 0.0 a 100.0
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict:
        return {"total": self.total_score, "breakdown": self.breakdown.to_dict()}


@dataclass(frozen=True)
class RankedMatch:
    """Freelancer junto a su score, tal como lo expone la API."""

    freelancer: FreelancerDescriptor
    score: MatchResult

    def to_dict(self) -> dict:
        return {
            "freelancer": self.freelancer.to_api_dict(),
            "score": self.score.to_dict(),
        }


def score_freelancer(
    job: JobDescriptor, freelancer: FreelancerDescriptor
) -> MatchResult:
    """
    Calcula el score de un freelancer para un job.

    Args:
        job: Job con sus skills requeridas
        freelancer: Candidato a evaluar

    Returns:
        MatchResult con total y breakdown escalados a [0, 100]
    """
    required = job.normalized_skills

    skills = skill_coverage_score(required, freelancer.skills)
    experience = experience_score(required, freelancer.skills)
    portfolio = portfolio_score(freelancer.portfolio)
    reviews = reviews_score(freelancer.reviews)
    total = weighted_total(skills, experience, portfolio, reviews)

    return MatchResult(
        freelancer_id=freelancer.id,
        total_score=to_percent(total),
        breakdown=ScoreBreakdown(
            skills=to_percent(skills),
            experience=to_percent(experience),
            portfolio=to_percent(portfolio),
            reviews=to_percent(reviews),
        ),
    )


def rank_candidates(
    job: JobDescriptor,
    freelancers: Sequence[FreelancerDescriptor],
    limit: int = DEFAULT_LIMIT,
) -> list[RankedMatch]:
    """
    Rankea freelancers para un job y devuelve los mejores `limit`.

    Los freelancers sin skills quedan fuera del ranking (no se
    puntúan con cero). Orden: total descendente y, a igual total,
    id ascendente.
    """
    if limit <= 0:
        return []

    matches = [
        RankedMatch(freelancer=f, score=score_freelancer(job, f))
        for f in freelancers
        if f.has_skills
    ]
    matches.sort(key=lambda m: (-m.score.total_score, str(m.score.freelancer_id)))

    return matches[:limit]


def rank_freelancers(
    job: JobDescriptor,
    freelancers: Sequence[FreelancerDescriptor],
    limit: int = DEFAULT_LIMIT,
) -> list[MatchResult]:
    """Igual que rank_candidates pero devuelve solo los scores."""
    return [m.score for m in rank_candidates(job, freelancers, limit)]
