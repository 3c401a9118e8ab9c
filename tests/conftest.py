# tests/conftest.py

import os
import tempfile
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

# окружение должно быть готово до первого импорта orders_api.config
_tmp_dir = tempfile.mkdtemp(prefix="orders_api_tests_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmp_dir, 'test.db')}"
os.environ["LOG_DIR"] = os.path.join(_tmp_dir, "log")
os.environ["LOG_PRINT"] = "0"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["MASK_NOT_FOUND_ON_WRITE"] = "0"

import pytest
from fastapi.testclient import TestClient

from orders_api.main import app
from orders_api.utils.database import drop_db, init_db


async def _reset_db():
    await drop_db()
    await init_db()


@pytest.fixture(scope="session")
def client():
    # один клиент и один event loop на всю сессию, движок SQLAlchemy привязан к нему
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clean_db(request):
    if "client" in request.fixturenames:
        request.getfixturevalue("client").portal.call(_reset_db)
    yield


@pytest.fixture
def order_id(client):
    response = client.post("/orders", json={})
    assert response.status_code == 201
    return response.json()["id"]


def make_request(db=None):
    """Подделка Request для сервисов: request.state.db и request.app.state.log."""
    if db is None:
        db = MagicMock()
        db.execute = AsyncMock()
        db.commit = AsyncMock()
        db.rollback = AsyncMock()
        db.refresh = AsyncMock()
    log = MagicMock()
    log.log_info = AsyncMock()
    log.log_error = AsyncMock()
    log.log_warning = AsyncMock()
    return SimpleNamespace(
        state=SimpleNamespace(db=db),
        app=SimpleNamespace(state=SimpleNamespace(log=log)),
    )


@pytest.fixture
def fake_request():
    return make_request()
