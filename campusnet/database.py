# campusnet/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from campusnet.config import DATABASE_URL
from campusnet.models.base_model import Base  # noqa: F401  (re-exported for create_all)

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
