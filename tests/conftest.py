from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from datetime import date
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DB_CONN_STRING", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from dog_bff.application.errors import StoreError
from dog_bff.config.settings import Settings
from dog_bff.domain.models.breed import Breed
from dog_bff.domain.models.pet import Pet
from dog_bff.infrastructure.db.base import Base
from dog_bff.infrastructure.db.orm.breed import BreedORM
from dog_bff.infrastructure.db.session import create_session_factory
from dog_bff.infrastructure.repos.store_memory import InMemoryStore
from dog_bff.infrastructure.repos.store_sqlalchemy import SQLAlchemyStore
from dog_bff.interfaces.http.main import create_app

BREED_1 = Breed(id="b1", name="Breed1", temperament="T1", origin="O1")
GOLDEN = Breed(
    id="golden-retriever",
    name="Golden Retriever",
    temperament="Intelligent, Friendly, Devoted",
    origin="Scotland",
)


class FailingStore(InMemoryStore):
    """Every store call fails the way a lost database connection would."""

    async def get_breeds(self) -> list[Breed]:
        raise StoreError("failed to query breeds: connection refused")

    async def get_breed_by_id(self, breed_id: str) -> Breed:
        raise StoreError(f"query error for breed ID {breed_id}: connection refused")

    async def get_pets(self) -> list[Pet]:
        raise StoreError("failed to query pets: connection refused")

    async def get_pet_by_id(self, pet_id: str) -> Pet:
        raise StoreError(f"query error for pet ID {pet_id}: connection refused")

    async def create_pet(self, name: str, birth: date, breed_id: str) -> Pet:
        raise StoreError("failed to insert pet and get ID: connection refused")


class BrokenInsertStore(InMemoryStore):
    """Reads work, inserts fail."""

    async def create_pet(self, name: str, birth: date, breed_id: str) -> Pet:
        raise StoreError("failed to insert pet and get ID: disk full")


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "db_conn_string": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
async def sql_store(test_settings: Settings) -> AsyncIterator[SQLAlchemyStore]:
    store = SQLAlchemyStore.from_url(test_settings.db_conn_string)
    async with store.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield store
    await store.close()


@pytest.fixture()
async def seeded_breeds(sql_store: SQLAlchemyStore) -> list[Breed]:
    breeds = [BREED_1, GOLDEN]
    async with create_session_factory(sql_store.engine)() as session:
        session.add_all(
            BreedORM(id=b.id, name=b.name, temperament=b.temperament, origin=b.origin)
            for b in breeds
        )
        await session.commit()
    return breeds


@pytest.fixture()
def app(test_settings: Settings, sql_store: SQLAlchemyStore):
    return create_app(settings=test_settings, store=sql_store)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as c:
        yield c


@pytest.fixture()
def client_for(test_settings: Settings) -> Callable[[object], AsyncClient]:
    """Build a client around an app wired to the given store."""

    def _build(store) -> AsyncClient:
        app = create_app(settings=test_settings, store=store)
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")

    return _build
