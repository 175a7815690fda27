# backend/schemas/part.py
from pydantic import BaseModel, Field, ConfigDict, StrictInt
from typing import Optional

from models.part import MAX_QUANTITY


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Editable attributes shared by create and update payloads
class PartFields(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    stock_quantity: StrictInt = Field(default=0, ge=0, le=MAX_QUANTITY)
    min_quantity: StrictInt = Field(default=0, ge=0, le=MAX_QUANTITY)
    location: Optional[str] = None
    supplier: Optional[str] = None
    photo: Optional[str] = None


# Schema for creating a new part
class PartCreate(PartFields):
    reference: str = Field(min_length=1)


# Schema for PUT requests - replaces every field except the reference.
# Stock is left as is when omitted; when sent it is written only if no
# movement changed it meanwhile.
class PartUpdate(PartFields):
    stock_quantity: Optional[StrictInt] = Field(default=None, ge=0, le=MAX_QUANTITY)


class PartOut(ORMBase):
    reference: str
    name: str
    category: str
    stock_quantity: int
    min_quantity: int
    location: Optional[str] = None
    supplier: Optional[str] = None
    photo: Optional[str] = None


class PartCreated(BaseModel):
    reference: str
    message: str
