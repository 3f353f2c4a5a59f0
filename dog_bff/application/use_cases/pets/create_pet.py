from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from dog_bff.application.errors import AppError, InternalError, ValidationError
from dog_bff.domain.models.pet import Pet
from dog_bff.domain.ports.breed_store import BreedStore
from dog_bff.domain.ports.pet_store import PetStore

logger = logging.getLogger(__name__)

BIRTH_FORMAT = "%Y-%m-%d"
_BIRTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(slots=True)
class CreatePetInput:
    name: str
    birth: str
    breed_id: str


def parse_birth(value: str) -> date:
    # strptime alone accepts unpadded fields like "2020-1-1"
    if not _BIRTH_PATTERN.fullmatch(value):
        raise ValidationError("Bad date of birth format. Use YYYY-MM-DD")
    try:
        return datetime.strptime(value, BIRTH_FORMAT).date()
    except ValueError as exc:
        raise ValidationError("Bad date of birth format. Use YYYY-MM-DD") from exc


async def execute(breeds: BreedStore, pets: PetStore, payload: CreatePetInput) -> Pet:
    # Not found and store failures both end up as the same 400 here.
    try:
        await breeds.get_breed_by_id(payload.breed_id)
    except AppError as exc:
        logger.info("Breed check failed for %r: %s", payload.breed_id, exc)
        raise ValidationError("Error at checking the breed") from exc

    birth = parse_birth(payload.birth)

    try:
        return await pets.create_pet(payload.name, birth, payload.breed_id)
    except AppError as exc:
        logger.error("Error creating pet in store: %s", exc, exc_info=exc)
        raise InternalError("Error creating pet") from exc
