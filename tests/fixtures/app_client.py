"""FastAPI app and client fixtures for tests."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from files_api.dependencies import get_caller_id
from files_api.main import create_app
from tests.consts import TEST_OWNER_ID


@pytest.fixture
def app(settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI):
    """Client whose requests are made on behalf of TEST_OWNER_ID."""
    app.dependency_overrides[get_caller_id] = lambda: TEST_OWNER_ID
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
