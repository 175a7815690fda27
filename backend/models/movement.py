# backend/models/movement.py
import enum
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from database import Base


class MovementKind(str, enum.Enum):
    INBOUND = "Inbound"
    OUTBOUND = "Outbound"


class Movement(Base):
    __tablename__ = "movements"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    # Logical link to parts.reference. No FK constraint: deleting a part
    # keeps its movement history.
    part_reference = Column(String, nullable=False, index=True)

    kind = Column(String, nullable=False)
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)

    # Set by the ledger when the movement is accepted
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    user = Column(String, nullable=False)
    machine = Column(String, nullable=True)
    comment = Column(String, nullable=True)
