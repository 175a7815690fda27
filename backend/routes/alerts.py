# backend/routes/alerts.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from services.queries import StockQueries
from schemas.part import PartOut

router = APIRouter(tags=["Alerts"])


# Parts at or below their minimum stock
@router.get("/alerts", response_model=List[PartOut])
def list_alerts(db: Session = Depends(get_db)):
    return StockQueries(db).list_low_stock()
