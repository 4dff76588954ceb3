import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.tests.fixtures.contact import *


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient for the application."""
    with TestClient(app) as c:
        yield c
