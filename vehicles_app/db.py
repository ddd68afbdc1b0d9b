from datetime import datetime, timezone

from sqlalchemy import create_engine, Column, DateTime, Float, Integer, JSON, String
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import settings


# In FastAPI, more than one thread can interact with the database for the same request
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = create_engine(settings.database_url, connect_args=connect_args)

# each instance of the SessionLocal class becomes a db session
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# parent class for the ORM models
Base = declarative_base()


def _utcnow():
    return datetime.now(timezone.utc)


class CarRecord(Base):
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    condition = Column(String(8), nullable=False)
    details = Column(JSON, nullable=False)
    # only the coordinates are stored, the address is looked up on every read
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    modified_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


def get_db():
    """
    Dependency function to get a database session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
