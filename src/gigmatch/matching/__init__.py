"""
Motor de matching.

Rankea freelancers contra un job con un score ponderado de
skills, experiencia, portfolio y reviews.
"""

from gigmatch.matching.engine import (
    MatchResult,
    RankedMatch,
    ScoreBreakdown,
    rank_candidates,
    rank_freelancers,
    score_freelancer,
)
from gigmatch.matching.scoring import LEVEL_FACTORS, WEIGHTS, clamp

__all__ = [
    "MatchResult",
    "RankedMatch",
    "ScoreBreakdown",
    "rank_candidates",
    "rank_freelancers",
    "score_freelancer",
    "LEVEL_FACTORS",
    "WEIGHTS",
    "clamp",
]
