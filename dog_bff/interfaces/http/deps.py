from __future__ import annotations

from fastapi import Request

from dog_bff.domain.ports.breed_store import BreedStore
from dog_bff.domain.ports.pet_store import PetStore
from dog_bff.domain.ports.store import Store


def _get_store(request: Request) -> Store:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not configured")
    return store


def get_breed_store(request: Request) -> BreedStore:
    return _get_store(request)


def get_pet_store(request: Request) -> PetStore:
    return _get_store(request)
