from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from dog_bff.domain.models.pet import Pet


class PetStore(ABC):
    @abstractmethod
    async def get_pets(self) -> list[Pet]: ...

    @abstractmethod
    async def get_pet_by_id(self, pet_id: str) -> Pet: ...

    @abstractmethod
    async def create_pet(self, name: str, birth: date, breed_id: str) -> Pet:
        """Persist a new pet.

        Raises NotFound when breed_id does not reference an existing breed, in
        which case nothing is inserted. Insert failures raise StoreError.
        """

    @abstractmethod
    async def delete_pet(self, pet_id: str) -> None:
        """Remove a pet, raising NotFound when no row was deleted."""
