
"""Stores chave-valor para o snapshot do carrinho: SQL (durável) e memória."""
from __future__ import annotations
from kink import di
from sqlalchemy.exc import SQLAlchemyError
from ..core.logging import get_logger
from ..domain.errors import ServiceFailure
from .models import StorageEntry

log = get_logger()

class SqlPersistenceStore:
    """Store durável em tabela storage_entries. Erros de banco viram ServiceFailure."""
    def __init__(self, session_factory=None):
        self.Session = session_factory or di["session_factory"]

    def read(self, key: str) -> str | None:
        try:
            with self.Session() as s:
                row = s.get(StorageEntry, key)
                return row.value if row else None
        except SQLAlchemyError as e:
            raise ServiceFailure(f"leitura de {key!r} falhou") from e

    def write(self, key: str, value: str) -> None:
        """Upsert do valor inteiro; commit antes de retornar."""
        try:
            with self.Session() as s, s.begin():
                row = s.get(StorageEntry, key)
                if row:
                    row.value = value
                else:
                    s.add(StorageEntry(key=key, value=value))
        except SQLAlchemyError as e:
            raise ServiceFailure(f"gravação de {key!r} falhou") from e
        log.debug("storage_written", key=key, size=len(value))

class MemoryPersistenceStore:
    """Store em memória para desenvolvimento e testes."""
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def write(self, key: str, value: str) -> None:
        self.data[key] = value
