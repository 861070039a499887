"""
Conexión a la base de datos (engine, pool y sesiones)
"""
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _normalize_url(url: str) -> str:
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no valida FKs salvo que se active por conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False):
    """
    Crea el engine con su pool de conexiones

    Para servidores (PostgreSQL) el pool tiene tamaño y tiempo de espera
    acotados: si no hay conexión libre en DB_POOL_TIMEOUT segundos la
    operación falla en lugar de quedar bloqueada.
    """
    url = _normalize_url(database_url)

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        url,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependencia de FastAPI: una sesión por request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Crea las tablas que no existan (no borra datos)"""
    Base.metadata.create_all(bind=bind or engine)


def dispose_engine(bind=None) -> None:
    """Cierra las conexiones del pool al apagar el servicio"""
    (bind or engine).dispose()
    logger.info("Pool de conexiones liberado")
