from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from uuid import uuid4

from dog_bff.application.errors import NotFound
from dog_bff.domain.models.breed import Breed
from dog_bff.domain.models.pet import Pet
from dog_bff.domain.ports.store import Store


class InMemoryStore(Store):
    """Dict-backed store for tests and local runs without a database."""

    def __init__(self, breeds: Iterable[Breed] = (), pets: Iterable[Pet] = ()) -> None:
        self._breeds: dict[str, Breed] = {b.id: b for b in breeds}
        self._pets: dict[str, Pet] = {p.id: p for p in pets}

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def get_breeds(self) -> list[Breed]:
        return list(self._breeds.values())

    async def get_breed_by_id(self, breed_id: str) -> Breed:
        breed = self._breeds.get(breed_id)
        if breed is None:
            raise NotFound(f"breed {breed_id} not found")
        return breed

    async def get_pets(self) -> list[Pet]:
        return list(self._pets.values())

    async def get_pet_by_id(self, pet_id: str) -> Pet:
        pet = self._pets.get(pet_id)
        if pet is None:
            raise NotFound(f"pet {pet_id} not found")
        return pet

    async def create_pet(self, name: str, birth: date, breed_id: str) -> Pet:
        breed = await self.get_breed_by_id(breed_id)
        pet = Pet(id=str(uuid4()), name=name, birth=birth, breed=breed)
        self._pets[pet.id] = pet
        return pet

    async def delete_pet(self, pet_id: str) -> None:
        if self._pets.pop(pet_id, None) is None:
            raise NotFound(f"pet {pet_id} not found")
