"""Root conftest: shared test configuration and fixtures."""

import os

# Must run before anything under epl_backend.app is imported: Settings
# reads the environment once, and the module-level app opens
# DATABASE_URL whenever it is started.
os.environ.setdefault("DATABASE_URL", ":memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from epl_backend.app.core.config import Settings  # noqa: E402
from epl_backend.app.core.state import AppState  # noqa: E402
from epl_backend.app.main import create_app  # noqa: E402


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "records.db")


@pytest.fixture
def state(db_path):
    """Fresh application state on its own database file."""
    app_state = AppState.open(db_path)
    yield app_state
    app_state.close()


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(database_url=str(tmp_path / "api.db"), log_level="WARNING"))
    with TestClient(app) as test_client:
        yield test_client
