"""
Modelo de Freelancer

Describe al candidato tal como lo devuelve el store de usuarios:
skills declaradas, items de portfolio y reviews recibidas.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


def _to_number(value) -> Optional[float]:
    """Convierte a float; valores no numéricos se toman como ausentes."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class ProficiencyLevel(str, Enum):
    """Niveles de dominio reconocidos para una skill."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


class Skill(BaseModel):
    """
    Skill declarada por el freelancer.

    El nivel se guarda como string libre: un valor desconocido no
    invalida el registro, simplemente aporta 0 al factor de nivel.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field("", alias="skillName", description="Nombre de la skill")
    level: Optional[str] = Field(
        None, description="BEGINNER, INTERMEDIATE, ADVANCED o EXPERT"
    )
    years_of_experience: Optional[float] = Field(
        None, alias="yearsOfExperience", description="Años de experiencia (>= 0)"
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("level", mode="before")
    @classmethod
    def _level_or_none(cls, value):
        return value if isinstance(value, str) else None

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _years_non_negative(cls, value):
        years = _to_number(value)
        return None if years is None else max(years, 0.0)


class PortfolioItem(BaseModel):
    """Trabajo publicado en el portfolio."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    image_urls: list[str] = Field(default_factory=list, alias="imageUrls")

    @computed_field(alias="imageCount")
    @property
    def image_count(self) -> int:
        return len(self.image_urls)


class Review(BaseModel):
    """Review recibida. Rating en escala 0-5; None cuenta como 0."""

    model_config = ConfigDict(frozen=True)

    rating: Optional[float] = None

    @field_validator("rating", mode="before")
    @classmethod
    def _rating_as_number(cls, value):
        return _to_number(value)


class FreelancerDescriptor(BaseModel):
    """
    Freelancer candidato para matching.

    Solo lectura: el motor nunca modifica estos datos.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Identificadores
    id: str = Field(..., description="ID del usuario")
    username: Optional[str] = None
    full_name: Optional[str] = Field(None, alias="fullName")
    profile_image: Optional[str] = Field(None, alias="profileImage")

    # Evidencia para el score
    skills: list[Skill] = Field(default_factory=list)
    portfolio: list[PortfolioItem] = Field(default_factory=list)
    reviews: list[Review] = Field(default_factory=list)

    @property
    def has_skills(self) -> bool:
        return len(self.skills) > 0

    def to_api_dict(self) -> dict:
        """Serializa con las claves camelCase que consume el frontend."""
        return self.model_dump(mode="json", by_alias=True)
