import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront.api import include_routers
from storefront.api.dependencies import get_storefront_client
from tests.factories import home_responses
from tests.fakes import FakeStorefrontClient


@pytest.fixture
def fake_client():
    return FakeStorefrontClient(responses=home_responses())


@pytest.fixture
def test_app(fake_client):
    app = FastAPI(title="Test Storefront")
    include_routers(app)
    app.dependency_overrides[get_storefront_client] = lambda: fake_client
    return app


@pytest.fixture
def test_client(test_app):
    with TestClient(test_app) as client:
        yield client
