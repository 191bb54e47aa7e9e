
"""Factory de sessão do SQLAlchemy 2."""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

def create_session_factory(database_url: str, create_schema: bool = False):
    """Cria SessionFactory síncrona para SQLAlchemy 2.

    :param database_url: URL completa do banco (ex: sqlite:///rocketshoes_cart.db).
    :param create_schema: cria as tabelas direto pelo metadata (dev/testes, sem Alembic).
    :return: sessionmaker configurado.
    """
    kwargs = {}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # SQLite em memória: uma única conexão compartilhada
        kwargs = {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    engine = create_engine(database_url, pool_pre_ping=True, future=True, **kwargs)
    if create_schema:
        from ..repo.models import Base
        Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
