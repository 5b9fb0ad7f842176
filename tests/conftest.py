import pytest
from fastapi.testclient import TestClient

from price_predictor.core.cache import cache
from price_predictor.main import app
from price_predictor.models.base import PropertyDescription


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def sample_property() -> PropertyDescription:
    """The form's default house, suburban."""
    return PropertyDescription(
        bedrooms=3,
        bathrooms=2,
        floors=1,
        year_built=2000,
        square_feet=1500,
        location="suburban",
        future_years=5,
    )
