from __future__ import annotations

from abc import ABC, abstractmethod

from dog_bff.domain.models.breed import Breed


class BreedStore(ABC):
    @abstractmethod
    async def get_breeds(self) -> list[Breed]: ...

    @abstractmethod
    async def get_breed_by_id(self, breed_id: str) -> Breed:
        """Return the breed or raise NotFound; other failures raise StoreError."""
