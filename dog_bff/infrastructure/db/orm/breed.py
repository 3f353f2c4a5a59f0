from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dog_bff.infrastructure.db.base import Base


class BreedORM(Base):
    __tablename__ = "breeds"

    # Slug-style ids such as "golden-retriever"
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    temperament: Mapped[str] = mapped_column(Text, nullable=False, default="")
    origin: Mapped[str] = mapped_column(String(255), nullable=False, default="")
