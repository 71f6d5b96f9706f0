"""
Funciones de scoring puras.

Cada función devuelve un valor en [0, 1]. No hacen I/O ni loguean:
el mismo input produce siempre el mismo output.
"""

from types import MappingProxyType
from typing import Iterable, Optional, Sequence, Union

from gigmatch.models import PortfolioItem, ProficiencyLevel, Review, Skill

# Pesos del score total (suman 1.0)
WEIGHTS = MappingProxyType(
    {
        "skills": 0.40,
        "experience": 0.25,
        "portfolio": 0.20,
        "reviews": 0.15,
    }
)

LEVEL_FACTORS = MappingProxyType(
    {
        ProficiencyLevel.BEGINNER.value: 0.25,
        ProficiencyLevel.INTERMEDIATE.value: 0.5,
        ProficiencyLevel.ADVANCED.value: 0.8,
        ProficiencyLevel.EXPERT.value: 1.0,
    }
)

# Puntos de saturación: a partir de acá se otorga el crédito máximo
MAX_YEARS = 10.0
MAX_PORTFOLIO_ITEMS = 10.0
MAX_DESCRIPTION_CHARS = 300.0
MAX_IMAGES = 5.0
RATING_SCALE = 5.0

LEVEL_WEIGHT = 0.7
YEARS_WEIGHT = 0.3


def clamp(value: float, min: float = 0.0, max: float = 1.0) -> float:
    """Acota value al intervalo [min, max]."""
    if value < min:
        return min
    if value > max:
        return max
    return value


def normalize_skill(name: object) -> str:
    """Nombre de skill comparable: sin espacios en los bordes y en minúsculas."""
    return str(name).strip().lower()


def _normalize_all(names: Iterable) -> frozenset[str]:
    return frozenset(normalize_skill(x) for x in names)


def level_factor(level: Optional[Union[str, ProficiencyLevel]]) -> float:
    """Factor de nivel; niveles desconocidos aportan 0."""
    if isinstance(level, ProficiencyLevel):
        level = level.value
    return LEVEL_FACTORS.get(level, 0.0)


def skill_coverage_score(required: Iterable[str], skills: Sequence[Skill]) -> float:
    """
    Fracción de skills requeridas que el freelancer declara.

    Sin requisitos el job no penaliza a nadie: devuelve 1.0.
    Semántica de conjunto: repetir una skill no suma dos veces.
    """
    required_set = _normalize_all(required)
    if not required_set:
        return 1.0

    owned = _normalize_all(s.name for s in skills)
    return clamp(len(required_set & owned) / len(required_set))


def experience_score(required: Iterable[str], skills: Sequence[Skill]) -> float:
    """
    Experiencia en las skills relevantes para el job.

    Sin requisitos o sin skills devuelve 0: la falta de restricción
    del job no infla el crédito de experiencia.
    """
    required_set = _normalize_all(required)
    if not required_set or not skills:
        return 0.0

    relevant = [s for s in skills if normalize_skill(s.name) in required_set]
    if not relevant:
        return 0.0

    avg_level = sum(level_factor(s.level) for s in relevant) / len(relevant)
    avg_years = sum((s.years_of_experience or 0) for s in relevant) / len(relevant)
    years_factor = clamp(avg_years / MAX_YEARS)

    return clamp(LEVEL_WEIGHT * avg_level + YEARS_WEIGHT * years_factor)


def portfolio_score(portfolio: Sequence[PortfolioItem]) -> float:
    """
    Cantidad y calidad del portfolio, mitad y mitad.

    La calidad de cada item es un proxy: largo de la descripción
    y cantidad de imágenes.
    """
    if not portfolio:
        return 0.0

    count_factor = clamp(len(portfolio) / MAX_PORTFOLIO_ITEMS)

    quality = 0.0
    for item in portfolio:
        desc_score = clamp(len(item.description or "") / MAX_DESCRIPTION_CHARS)
        images_score = clamp(item.image_count / MAX_IMAGES)
        quality += 0.5 * desc_score + 0.5 * images_score
    quality = clamp(quality / len(portfolio))

    return clamp(0.5 * count_factor + 0.5 * quality)


def reviews_score(reviews: Sequence[Review]) -> float:
    """Rating promedio normalizado a [0, 1]."""
    if not reviews:
        return 0.0

    avg = sum((r.rating or 0) for r in reviews) / len(reviews)
    return clamp(avg / RATING_SCALE)


def weighted_total(
    skills: float, experience: float, portfolio: float, reviews: float
) -> float:
    """Combina los sub-scores (ya en [0, 1]) con WEIGHTS."""
    total = (
        WEIGHTS["skills"] * clamp(skills)
        + WEIGHTS["experience"] * clamp(experience)
        + WEIGHTS["portfolio"] * clamp(portfolio)
        + WEIGHTS["reviews"] * clamp(reviews)
    )
    return clamp(total)


def to_percent(value: float) -> float:
    """Escala [0, 1] -> [0, 100] con 2 decimales."""
    return round(clamp(value) * 100, 2)
