# backend/models/part.py
from sqlalchemy import Column, Integer, String, CheckConstraint
from database import Base

# Largest stock or movement quantity accepted (signed 32-bit INTEGER)
MAX_QUANTITY = 2**31 - 1

# Model Part
# A spare part kept in the store room, keyed by its reference code.
# Stock is adjusted by direct edits or by recorded movements and
# is never allowed to go below zero.
class Part(Base):
    __tablename__ = "parts"

    reference = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False)

    # Stock levels, guarded by check constraints.
    stock_quantity = Column(Integer, CheckConstraint(f"stock_quantity >= 0 AND stock_quantity <= {MAX_QUANTITY}"), nullable=False, default=0)
    min_quantity = Column(Integer, CheckConstraint(f"min_quantity >= 0 AND min_quantity <= {MAX_QUANTITY}"), nullable=False, default=0)

    location = Column(String)
    supplier = Column(String, nullable=True)

    # Optional URL of the part photo.
    photo = Column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<Part {self.reference}: {self.stock_quantity}>"
