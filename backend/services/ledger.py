# backend/services/ledger.py
import logging
from datetime import datetime, timezone
from typing import Optional, Union

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.movement import Movement, MovementKind
from models.part import MAX_QUANTITY, Part
from services.errors import (
    InvalidMovementKind, InvalidQuantity, InvalidRequest,
    PartNotFound, InsufficientStock, StockOverflow, StoreError,
)

logger = logging.getLogger(__name__)


def _parse_kind(kind: Union[str, MovementKind]) -> MovementKind:
    try:
        return MovementKind(kind)
    except ValueError:
        raise InvalidMovementKind(kind) from None


class MovementLedger:
    """Records stock movements and adjusts part stock in one transaction."""

    def __init__(self, db: Session):
        self.db = db

    def record_movement(
        self,
        reference: str,
        kind: Union[str, MovementKind],
        quantity: int,
        user: str,
        machine: Optional[str] = None,
        comment: Optional[str] = None,
    ) -> int:
        """
        Apply a movement to a part and return the new movement id.

        The stock column is changed with a conditional UPDATE, so the
        "enough stock?" test and the deduction happen in the same
        statement under the database's row (or table) write lock. The
        movement row is added in the same transaction; nothing is kept
        if any step fails.
        """
        kind = _parse_kind(kind)
        # bool is an int subclass; True is not a quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or not 0 < quantity <= MAX_QUANTITY:
            raise InvalidQuantity(quantity)
        if not isinstance(user, str) or not user.strip():
            raise InvalidRequest("User is required")

        if kind is MovementKind.INBOUND:
            stmt = (
                update(Part)
                .where(Part.reference == reference, Part.stock_quantity <= MAX_QUANTITY - quantity)
                .values(stock_quantity=Part.stock_quantity + quantity)
            )
        else:
            stmt = (
                update(Part)
                .where(Part.reference == reference, Part.stock_quantity >= quantity)
                .values(stock_quantity=Part.stock_quantity - quantity)
            )

        try:
            result = self.db.execute(stmt.execution_options(synchronize_session=False))
            if result.rowcount == 0:
                # Still inside the write transaction, so this read is stable
                available = self.db.query(Part.stock_quantity).filter(Part.reference == reference).scalar()
                self.db.rollback()
                if available is None:
                    logger.warning("Movement rejected: part %s not found", reference)
                    raise PartNotFound(reference)
                logger.warning(
                    "Movement rejected: %s has %s in stock, %s %s", reference, available, kind.value, quantity
                )
                if kind is MovementKind.INBOUND:
                    raise StockOverflow(reference, available, quantity, MAX_QUANTITY)
                raise InsufficientStock(reference, available, quantity)

            movement = Movement(
                part_reference=reference,
                kind=kind.value,
                quantity=quantity,
                created_at=datetime.now(timezone.utc),
                user=user,
                machine=machine,
                comment=comment,
            )
            self.db.add(movement)
            self.db.flush()
            movement_id = movement.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to record movement on %s", reference)
            raise StoreError(f"Failed to record movement: {e}") from e

        logger.info(
            "Movement %s recorded: %s %s x%s by %s", movement_id, kind.value, reference, quantity, user
        )
        return movement_id
