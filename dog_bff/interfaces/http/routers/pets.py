from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError as PydanticValidationError

from dog_bff.application.errors import NotFound, ValidationError
from dog_bff.application.use_cases.pets import create_pet as create_pet_uc
from dog_bff.domain.ports.breed_store import BreedStore
from dog_bff.domain.ports.pet_store import PetStore
from dog_bff.interfaces.http.deps import get_breed_store, get_pet_store
from dog_bff.interfaces.http.schemas.pets import CreatePetRequest, PetResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pets", tags=["pets"])


@router.get("", response_model=list[PetResponse])
async def list_pets(*, pets: PetStore = Depends(get_pet_store)):
    items = await pets.get_pets()
    return [PetResponse.model_validate(p) for p in items]


@router.get("/{pet_id}", response_model=PetResponse)
async def get_pet(pet_id: str, *, pets: PetStore = Depends(get_pet_store)):
    try:
        pet = await pets.get_pet_by_id(pet_id)
    except NotFound as exc:
        raise NotFound("Pet not found") from exc
    return PetResponse.model_validate(pet)


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
async def create_pet(
    request: Request,
    *,
    pets: PetStore = Depends(get_pet_store),
    breeds: BreedStore = Depends(get_breed_store),
):
    # The body is decoded by hand so malformed JSON maps to a 400 with a fixed
    # message instead of FastAPI's 422 validation payload.
    raw = await request.body()
    try:
        payload = CreatePetRequest.model_validate_json(raw)
    except PydanticValidationError as exc:
        logger.info("Rejected pet body: %s", exc.errors(include_url=False))
        raise ValidationError("Error decoding the body of the request") from exc

    created = await create_pet_uc.execute(
        breeds,
        pets,
        create_pet_uc.CreatePetInput(
            name=payload.name,
            birth=payload.birth,
            breed_id=payload.breed_id,
        ),
    )
    return PetResponse.model_validate(created)
