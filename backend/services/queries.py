# backend/services/queries.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from models.movement import Movement
from models.part import Part
from models.user import User
from services.errors import PartNotFound


def _movement_row(movement: Movement, part_name: Optional[str]) -> dict:
    return {
        "id": movement.id,
        "part_reference": movement.part_reference,
        "kind": movement.kind,
        "quantity": movement.quantity,
        "created_at": movement.created_at,
        "user": movement.user,
        "machine": movement.machine,
        "comment": movement.comment,
        "part_name": part_name,
    }


class StockQueries:
    """Read-only views over parts, movements and users."""

    def __init__(self, db: Session):
        self.db = db

    def list_parts(self, q: Optional[str] = None, category: Optional[str] = None) -> List[Part]:
        query = self.db.query(Part)

        # Free-text search over reference, name and category
        if q:
            like = f"%{q}%"
            query = query.filter(or_(
                Part.reference.ilike(like), Part.name.ilike(like), Part.category.ilike(like),
            ))
        if category:
            query = query.filter(Part.category == category)

        return query.order_by(Part.reference.asc()).all()

    def get_part(self, reference: str) -> Part:
        part = self.db.query(Part).filter(Part.reference == reference).first()
        if not part:
            raise PartNotFound(reference)
        return part

    def list_categories(self) -> List[str]:
        values = (
            self.db.query(Part.category).distinct()
            .filter(Part.category != None, Part.category != "")  # noqa: E711
            .order_by(Part.category.asc())
            .all()
        )
        return [v[0] for v in values]

    def list_movements(self) -> List[dict]:
        """All movements, newest first, with the part name (None for deleted parts)."""
        rows = (
            self.db.query(Movement, Part.name)
            .outerjoin(Part, Part.reference == Movement.part_reference)
            .order_by(Movement.created_at.desc(), Movement.id.desc())
            .all()
        )
        return [_movement_row(m, name) for m, name in rows]

    def list_movements_for_part(self, reference: str) -> List[Movement]:
        return (
            self.db.query(Movement)
            .filter(Movement.part_reference == reference)
            .order_by(Movement.created_at.desc(), Movement.id.desc())
            .all()
        )

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.name.asc()).all()

    def list_low_stock(self) -> List[Part]:
        # Reaching the minimum exactly already raises an alert
        return (
            self.db.query(Part)
            .filter(Part.stock_quantity <= Part.min_quantity)
            .order_by(Part.reference.asc())
            .all()
        )
