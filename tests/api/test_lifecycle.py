"""Application lifecycle: building, starting and restarting the app.

Tests cover:
    - Building the app does not open the database
    - The same app can be started again after a shutdown
    - Importing the services loads neither FastAPI nor the database
"""

import os
import subprocess
import sys

from fastapi.testclient import TestClient

from epl_backend.app.core.config import Settings
from epl_backend.app.main import create_app

ARSENAL = {"name": "Arsenal", "manager": "Arteta", "stadium": "Emirates"}


def _settings(path):
    return Settings(database_url=str(path), log_level="WARNING")


def test_building_the_app_opens_no_database(tmp_path):
    path = tmp_path / "lazy.db"
    app = create_app(_settings(path))
    assert not path.exists()
    with TestClient(app):
        assert path.exists()


def test_app_serves_again_after_restart(tmp_path):
    app = create_app(_settings(tmp_path / "restart.db"))
    with TestClient(app) as client:
        created = client.post("/api/v1/teams/", json=ARSENAL)
        assert created.status_code == 201
    with TestClient(app) as client:
        response = client.get(f"/api/v1/teams/{created.json()['id']}")
        assert response.status_code == 200
        assert response.json() == created.json()
        assert client.post("/api/v1/teams/", json=ARSENAL).json()["id"] == 2


def test_importing_services_stays_off_the_web_stack(tmp_path):
    path = tmp_path / "untouched.db"
    code = (
        "import sys\n"
        "import epl_backend.app.services.team_service\n"
        "print('fastapi' in sys.modules)\n"
    )
    env = {**os.environ, "DATABASE_URL": str(path)}
    result = subprocess.run(
        [sys.executable, "-c", code],
        env=env,
        capture_output=True,
        text=True,
        check=True,
        cwd=os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    )
    assert result.stdout.strip() == "False"
    assert not path.exists()
