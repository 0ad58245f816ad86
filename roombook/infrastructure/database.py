from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from .config import settings


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # one shared connection so an in-memory database survives across sessions
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, pool_pre_ping=True)


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()
