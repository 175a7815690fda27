# backend/routes/movements.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from services.ledger import MovementLedger
from services.queries import StockQueries
import schemas.movement as movement_schemas

router = APIRouter(prefix="/movements", tags=["Movements"])


@router.get("", response_model=List[movement_schemas.MovementWithPart])
def list_movements(db: Session = Depends(get_db)):
    return StockQueries(db).list_movements()


@router.get("/part/{reference}", response_model=List[movement_schemas.MovementOut])
def list_part_movements(reference: str, db: Session = Depends(get_db)):
    return StockQueries(db).list_movements_for_part(reference)


@router.post("", response_model=movement_schemas.MovementRecorded, status_code=201)
def record_movement(payload: movement_schemas.MovementCreate, db: Session = Depends(get_db)):
    movement_id = MovementLedger(db).record_movement(
        reference=payload.part_reference,
        kind=payload.kind,
        quantity=payload.quantity,
        user=payload.user,
        machine=payload.machine,
        comment=payload.comment,
    )
    return {"id": movement_id, "message": "Movement recorded"}
