import pytest

from gigmatch.config import get_settings
from gigmatch.models import FreelancerDescriptor, JobDescriptor


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings cacheados pueden arrastrar env de otro test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_freelancer():
    """
    Builder de freelancers: make_freelancer("f1", skills=[...]).
    Acepta los mismos payloads camelCase que devuelve el store.
    """
    def _make(freelancer_id: str, skills=None, portfolio=None, reviews=None, **extra):
        return FreelancerDescriptor.model_validate(
            {
                "id": freelancer_id,
                "skills": skills or [],
                "portfolio": portfolio or [],
                "reviews": reviews or [],
                **extra,
            }
        )
    return _make


@pytest.fixture
def react_node_job():
    return JobDescriptor.model_validate(
        {"id": "job-1", "title": "Marketplace MVP", "requiredSkills": ["React", "Node.js"]}
    )
