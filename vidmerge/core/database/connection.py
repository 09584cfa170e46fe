# File: vidmerge/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from vidmerge.core.config.settings import settings

# The default SQLite file lives in the data dir
settings.ensure_dirs()

# check_same_thread=False: jobs are written from the worker thread
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db():
    """Creates the run-history tables if they don't exist."""
    from vidmerge.core.jobs import models  # noqa: F401 registers JobModel
    from .base import Base
    Base.metadata.create_all(bind=engine)
