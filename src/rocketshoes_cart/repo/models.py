
"""Modelos SQLAlchemy do armazenamento chave-valor."""
from __future__ import annotations
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import String, Text, TIMESTAMP
from datetime import datetime, timezone

class Base(DeclarativeBase):
    """Base declarativa."""
    pass

class StorageEntry(Base):
    """Uma chave, um valor serializado (equivalente ao localStorage)."""
    __tablename__ = "storage_entries"
    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=False),
        default=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
        onupdate=lambda: datetime.now(timezone.utc).replace(tzinfo=None),
    )
