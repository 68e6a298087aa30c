from unittest.mock import AsyncMock, MagicMock

import pytest
from tests.fakes import FakeSource, make_rate
from fastapi.testclient import TestClient

from api.dependencies import get_rate_service, get_redis_cache, get_registry
from api.main import app
from application.services.registry import ProviderRegistry
from domain.models.currency import LatestResponse, ProviderStatus, SourceInfo

LATEST = LatestResponse(
    expected=('EUR', 'GBP', 'USD'),
    unreceived=('GBP',),
    info=(
        SourceInfo(name='ecb', status=ProviderStatus.OK),
        SourceInfo(name='rcb', status=ProviderStatus.FAILED, error_message='round deadline exceeded'),
    ),
    result=(make_rate('EUR', 'USD', 1.1448), make_rate('USD', 'EUR', 1 / 1.1448)),
)


@pytest.fixture
def latest():
    return LATEST


@pytest.fixture
def registry():
    registry = ProviderRegistry()
    registry.register('ecb', FakeSource('ecb', exchangeable=['EUR', 'USD', 'GBP']))
    return registry


@pytest.fixture
def mock_rate_service():
    mock_service = MagicMock()
    mock_service.get_latest = AsyncMock(return_value=LATEST)
    return mock_service


@pytest.fixture
def mock_cache():
    mock_cache = AsyncMock()
    mock_cache.get_latest.return_value = None
    return mock_cache


@pytest.fixture
def client(registry, mock_rate_service, mock_cache):
    # Override the real dependencies with mocks
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_rate_service] = lambda: mock_rate_service
    app.dependency_overrides[get_redis_cache] = lambda: mock_cache
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
