# backend/models/user.py
from sqlalchemy import Column, Integer, String
from database import Base

# Operator allowed to record movements; referenced by name only
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
