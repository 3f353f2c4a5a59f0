from __future__ import annotations

from datetime import date
from uuid import uuid4

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from dog_bff.infrastructure.db.base import Base


def _new_pet_id() -> str:
    return str(uuid4())


class PetORM(Base):
    __tablename__ = "pets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_pet_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth: Mapped[date] = mapped_column(Date, nullable=False)
    breed_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("breeds.id"), nullable=False, index=True
    )
