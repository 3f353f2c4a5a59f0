from __future__ import annotations

from abc import ABC, abstractmethod

from dog_bff.domain.ports.breed_store import BreedStore
from dog_bff.domain.ports.pet_store import PetStore


class Store(BreedStore, PetStore, ABC):
    """Both contracts plus the lifecycle the application drives at startup/shutdown."""

    @abstractmethod
    async def ping(self) -> None:
        """Round trip to the backend, raising StoreError when it is unreachable."""

    @abstractmethod
    async def close(self) -> None: ...
