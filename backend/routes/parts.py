# backend/routes/parts.py
from typing import Optional, List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from services.parts import PartService
from services.queries import StockQueries
import schemas.part as part_schemas

router = APIRouter(prefix="/parts", tags=["Parts"])


# =========================
# PART LIST
# =========================
@router.get("", response_model=List[part_schemas.PartOut])
def list_parts(
    q: Optional[str] = Query(None, description="Search reference, name or category"),
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return StockQueries(db).list_parts(q=q, category=category)


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return StockQueries(db).list_categories()


# =========================
# SINGLE PART
# =========================
@router.get("/{reference}", response_model=part_schemas.PartOut)
def get_part(reference: str, db: Session = Depends(get_db)):
    return StockQueries(db).get_part(reference)


@router.post("", response_model=part_schemas.PartCreated, status_code=201)
def create_part(payload: part_schemas.PartCreate, db: Session = Depends(get_db)):
    reference = PartService(db).create(payload)
    return {"reference": reference, "message": "Part created"}


@router.put("/{reference}")
def update_part(reference: str, payload: part_schemas.PartUpdate, db: Session = Depends(get_db)):
    PartService(db).update(reference, payload)
    return {"message": "Part updated"}


@router.delete("/{reference}")
def delete_part(reference: str, db: Session = Depends(get_db)):
    PartService(db).delete(reference)
    return {"message": "Part deleted"}
