"""
Modelo de Job publicado por un cliente.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class JobDescriptor(BaseModel):
    """Job contra el cual se rankean freelancers."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="ID del job")
    title: Optional[str] = None
    required_skills: list[str] = Field(
        default_factory=list,
        alias="requiredSkills",
        description="Skills requeridas (case-insensitive)",
    )

    @property
    def normalized_skills(self) -> frozenset[str]:
        """Skills requeridas en minúsculas y sin espacios, sin repetidos."""
        return frozenset(str(s).strip().lower() for s in self.required_skills)
