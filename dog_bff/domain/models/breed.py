from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Breed:
    id: str
    name: str
    temperament: str
    origin: str
