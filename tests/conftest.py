from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import customer, delivery_record  # noqa: F401
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "timezone": "Asia/Kolkata",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def make_customer(client):
    async def _make(name: str, customer_type: str = "regular", daily_amount: float = 1) -> dict:
        resp = await client.post(
            "/customers",
            json={"name": name, "customerType": customer_type, "dailyAmount": daily_amount},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
