import pytest
from fastapi.testclient import TestClient

from pet_adoption_api.app.core.config import settings
from pet_adoption_api.app.core.db import init_db
from pet_adoption_api.app.core.security import create_access_token
from pet_adoption_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file and apply migrations."""
    db_path = tmp_path / "pets.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(principal: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': principal})}"}


@pytest.fixture
def user_payload():
    return {
        "name": "Jane Doe",
        "phoneNumber": "+1 555 0100",
        "email": "jane@example.com",
        "address": "12 Elm Street",
    }


@pytest.fixture
def shelter_payload():
    return {
        "name": "Happy Paws",
        "location": "Springfield",
        "phoneNumber": "+1 555 0199",
        "email": "hello@happypaws.org",
    }


@pytest.fixture
def pet_payload():
    return {
        "name": "Rex",
        "species": "Dog",
        "breed": "Labrador",
        "gender": "male",
        "age": "3",
        "petImage": "https://example.com/rex.png",
        "description": "Friendly and house trained",
        "healthStatus": "vaccinated",
        "shelterId": "ID-1",
    }
