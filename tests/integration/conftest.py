from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.config import Settings, get_settings
from src.main import app as main_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, SERVERPORT=8080, MAX_REQUEST_BODY_BYTES=1024)


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    # Each client runs the lifespan, so every test gets a fresh store.
    with TestClient(test_app) as client:
        yield client
