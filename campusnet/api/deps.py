# campusnet/api/deps.py
from typing import Generator
from sqlalchemy.orm import Session
from campusnet.database import SessionLocal

def get_db() -> Generator[Session, None, None]:
    """Yield one database session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
