"""
Modelos de datos del sistema.

Entradas de solo lectura para el motor de matching:
- JobDescriptor: job publicado con sus skills requeridas
- FreelancerDescriptor: candidato con skills, portfolio y reviews
"""

from gigmatch.models.job import JobDescriptor
from gigmatch.models.freelancer import (
    FreelancerDescriptor,
    PortfolioItem,
    ProficiencyLevel,
    Review,
    Skill,
)

__all__ = [
    # Job
    "JobDescriptor",
    # Freelancer
    "FreelancerDescriptor",
    "PortfolioItem",
    "ProficiencyLevel",
    "Review",
    "Skill",
]
