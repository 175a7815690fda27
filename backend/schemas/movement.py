# backend/schemas/movement.py
from pydantic import BaseModel, Field, ConfigDict, StrictInt
from datetime import datetime
from typing import Optional


# Payload for recording a movement. Kind and quantity range are checked by
# the ledger so that a bad value is reported as a 400, like a stock shortage.
# StrictInt keeps JSON true and 2.0 from passing as quantities.
class MovementCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    part_reference: str = Field(min_length=1)
    kind: str
    quantity: StrictInt
    user: str = Field(min_length=1)
    machine: Optional[str] = None
    comment: Optional[str] = None


class MovementOut(BaseModel):
    id: int
    part_reference: str
    kind: str
    quantity: int
    created_at: datetime
    user: str
    machine: Optional[str] = None
    comment: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# Movement joined with the name of its part (None once the part is deleted)
class MovementWithPart(MovementOut):
    part_name: Optional[str] = None


class MovementRecorded(BaseModel):
    id: int
    message: str
