# app/db/get_db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.core import config


def build_engine(database_url: str):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        return create_engine(database_url, echo=False, future=True, connect_args=connect_args)
    return create_engine(database_url, echo=False, future=True, pool_pre_ping=True)


engine = build_engine(config.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
