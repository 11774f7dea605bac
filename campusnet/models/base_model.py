# campusnet/models/base_model.py
from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """
    Declarative base for the SQLAlchemy 2.0 models.
    Every table in the project inherits from this class.
    """
    pass
