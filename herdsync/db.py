from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool


Base = declarative_base()


def create_session_factory(database_url: str, create_tables: bool = True):
    """Build an engine + session factory for the local store.

    In-memory SQLite gets a StaticPool so every session sees the same database.
    """
    kwargs = {"future": True, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, **kwargs)

    if create_tables:
        # Import models so they register on Base.metadata
        from .models import models  # noqa: F401
        Base.metadata.create_all(bind=engine)

    # IMPORTANT: one Session per sync pass, never shared across passes
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True, expire_on_commit=False)
