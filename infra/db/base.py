# infra/db/base.py
from __future__ import annotations
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(db_url: str) -> Engine:
    logger.info("Using database at: %s", db_url)
    return create_engine(db_url, echo=False, future=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_schema(engine: Engine) -> None:
    # registers the ORM tables on Base.metadata
    import infra.db.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
