from __future__ import annotations

from fastapi import APIRouter, Depends

from dog_bff.application.errors import NotFound
from dog_bff.domain.ports.breed_store import BreedStore
from dog_bff.interfaces.http.deps import get_breed_store
from dog_bff.interfaces.http.schemas.breeds import BreedResponse

router = APIRouter(prefix="/breeds", tags=["breeds"])


@router.get("", response_model=list[BreedResponse])
async def list_breeds(*, breeds: BreedStore = Depends(get_breed_store)):
    items = await breeds.get_breeds()
    return [BreedResponse.model_validate(b) for b in items]


@router.get("/{breed_id}", response_model=BreedResponse)
async def get_breed(breed_id: str, *, breeds: BreedStore = Depends(get_breed_store)):
    try:
        breed = await breeds.get_breed_by_id(breed_id)
    except NotFound as exc:
        raise NotFound("Breed not found") from exc
    return BreedResponse.model_validate(breed)
