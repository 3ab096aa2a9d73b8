import pytest
from fastapi.testclient import TestClient

from sih_portal.core.config.settings import Settings
from sih_portal.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'portal.db'}",
        LOG_DIR=str(tmp_path / "logs"),
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def submission_payload():
    return {
        "team_id": "001_SIH",
        "team_name": "Byte Benders",
        "leader_name": "Asha Verma",
        "leader_id": "L-1001",
        "phone": "9876543210",
        "problem_code": "SIH25010",
        "slides_link": "https://docs.example.com/presentation/d/abc123",
    }
