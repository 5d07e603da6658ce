"""
Test configuration and fixtures for the study-abroad counsellor.

Provides shared fixtures for unit and integration tests.
"""

import pytest
from fastapi.testclient import TestClient

from counsellor.domain.services import RecommendationService
from counsellor.infrastructure.catalog import UniversityRepository


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Get the FastAPI application."""
    from counsellor.main import app
    return app


@pytest.fixture
def client(app):
    """Test client with the application lifespan (catalog loaded)."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# Catalog Fixtures
# =============================================================================

@pytest.fixture
def repository():
    """University repository backed by the packaged seed catalog."""
    return UniversityRepository.from_file()


@pytest.fixture
def recommendation_service(repository):
    return RecommendationService(repository)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def strong_profile():
    """Profile matching MIT's requirements exactly."""
    return {
        "gpa": 3.8,
        "ielts": 7.5,
        "gre": 325,
        "budget": 55000,
    }


@pytest.fixture
def mit_requirements():
    """MIT requirements from the seed catalog."""
    return {"gpa": 3.8, "ielts": 7.5, "toefl": 100, "gre": 325}
