from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from dog_bff.domain.models.breed import Breed


@dataclass(slots=True)
class Pet:
    id: str
    name: str
    birth: date
    # Pets always carry the full breed record, not just its id
    breed: Breed
