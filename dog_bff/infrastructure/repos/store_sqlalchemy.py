from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import Select, delete, insert, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from dog_bff.application.errors import ForeignKeyViolation, NotFound, StoreError
from dog_bff.domain.models.breed import Breed
from dog_bff.domain.models.pet import Pet
from dog_bff.domain.ports.store import Store
from dog_bff.infrastructure.db.orm.breed import BreedORM
from dog_bff.infrastructure.db.orm.pet import PetORM
from dog_bff.infrastructure.db.session import create_engine, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyStore(Store):
    """Breed and pet persistence over a single SQLAlchemy connection pool.

    Every operation checks out its own session, so one instance can be shared
    by all concurrent requests. The engine is owned by the store and released
    with ``close()``.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = create_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str) -> SQLAlchemyStore:
        return cls(create_engine(database_url))

    async def ping(self) -> None:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("failed to ping database") from exc
        logger.info("Connected to database (%s)", self.engine.url.get_backend_name())

    async def close(self) -> None:
        await self.engine.dispose()

    def _breed_to_domain(self, orm: BreedORM) -> Breed:
        return Breed(
            id=orm.id,
            name=orm.name,
            temperament=orm.temperament,
            origin=orm.origin,
        )

    def _pet_to_domain(self, orm: PetORM, breed: BreedORM) -> Pet:
        return Pet(
            id=orm.id,
            name=orm.name,
            birth=orm.birth,
            breed=self._breed_to_domain(breed),
        )

    # Breeds

    async def get_breeds(self) -> list[Breed]:
        stmt = select(BreedORM).order_by(BreedORM.name)
        try:
            async with self._session_factory() as session:
                res = await session.execute(stmt)
                items = res.scalars().all()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("failed to query breeds") from exc
        return [self._breed_to_domain(x) for x in items]

    async def get_breed_by_id(self, breed_id: str) -> Breed:
        stmt = select(BreedORM).where(BreedORM.id == breed_id)
        try:
            async with self._session_factory() as session:
                res = await session.execute(stmt)
                orm = res.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"query error for breed ID {breed_id}") from exc
        if orm is None:
            raise NotFound(f"breed {breed_id} not found")
        return self._breed_to_domain(orm)

    # Pets

    def _pets_with_breed(self) -> Select[tuple[PetORM, BreedORM]]:
        return select(PetORM, BreedORM).join(BreedORM, PetORM.breed_id == BreedORM.id)

    async def get_pets(self) -> list[Pet]:
        stmt = self._pets_with_breed().order_by(PetORM.name)
        try:
            async with self._session_factory() as session:
                res = await session.execute(stmt)
                rows = res.all()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("failed to query pets") from exc
        return [self._pet_to_domain(pet, breed) for pet, breed in rows]

    async def get_pet_by_id(self, pet_id: str) -> Pet:
        stmt = self._pets_with_breed().where(PetORM.id == pet_id)
        try:
            async with self._session_factory() as session:
                res = await session.execute(stmt)
                row = res.one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"query error for pet ID {pet_id}") from exc
        if row is None:
            raise NotFound(f"pet {pet_id} not found")
        pet, breed = row
        return self._pet_to_domain(pet, breed)

    async def create_pet(self, name: str, birth: date, breed_id: str) -> Pet:
        # Check the breed first so a missing one surfaces as NotFound instead of
        # a constraint violation from the insert.
        breed = await self.get_breed_by_id(breed_id)

        stmt = (
            insert(PetORM)
            .values(name=name, birth=birth, breed_id=breed_id)
            .returning(PetORM.id)
        )
        try:
            async with self._session_factory() as session:
                res = await session.execute(stmt)
                new_pet_id = res.scalar_one()
                await session.commit()
        except IntegrityError as exc:
            raise ForeignKeyViolation(f"breed {breed_id} rejected by pets insert") from exc
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError("failed to insert pet and get ID") from exc
        return Pet(id=new_pet_id, name=name, birth=birth, breed=breed)

    async def delete_pet(self, pet_id: str) -> None:
        stmt = delete(PetORM).where(PetORM.id == pet_id)
        try:
            async with self._session_factory() as session:
                res = await session.execute(stmt)
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"failed to delete pet {pet_id}") from exc
        if res.rowcount == 0:
            raise NotFound(f"pet {pet_id} not found")
