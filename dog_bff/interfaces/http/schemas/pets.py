from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dog_bff.interfaces.http.schemas.breeds import BreedResponse


class CreatePetRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Missing or null fields decode to "" and are rejected by the later checks
    name: str = ""
    birth: str = ""
    breed_id: str = Field("", alias="breedId")

    @field_validator("name", "birth", "breed_id", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class PetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    # Calendar date, serialized as "YYYY-MM-DD"
    birth: date
    breed: BreedResponse
