# backend/routes/users.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from services.queries import StockQueries
from schemas.user import UserResponse

router = APIRouter(tags=["Users"])


# Seeded operators, alphabetical
@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return StockQueries(db).list_users()
