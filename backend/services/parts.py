# backend/services/parts.py
import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.part import Part
from schemas.part import PartCreate, PartUpdate
from services.errors import InvalidRequest, PartAlreadyExists, PartNotFound, StockChanged, StoreError

logger = logging.getLogger(__name__)


def _norm_reference(reference: str) -> str:
    ref = (reference or "").strip()
    if not ref:
        raise InvalidRequest("Part reference is required")
    return ref


class PartService:
    """Create, edit and remove parts. Stock changes from movements go through MovementLedger."""

    def __init__(self, db: Session):
        self.db = db

    def _get(self, reference: str) -> Part:
        part = self.db.query(Part).filter(Part.reference == reference).first()
        if not part:
            raise PartNotFound(reference)
        return part

    def _commit(self, action: str, reference: str):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to %s part %s", action, reference)
            raise StoreError(f"Failed to {action} part {reference}: {e}") from e

    def create(self, data: PartCreate) -> str:
        reference = _norm_reference(data.reference)
        if self.db.query(Part).filter(Part.reference == reference).first():
            raise PartAlreadyExists(reference)

        fields = data.model_dump(exclude={"reference"})
        self.db.add(Part(reference=reference, **fields))
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with another insert of the same reference
            self.db.rollback()
            raise PartAlreadyExists(reference) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to create part %s", reference)
            raise StoreError(f"Failed to create part {reference}: {e}") from e

        logger.info("Part %s created", reference)
        return reference

    def update(self, reference: str, data: PartUpdate) -> Part:
        """Replace the part's fields.

        A new stock value is written only if the stock still holds the value
        read here, so a movement recorded in between is never overwritten.
        """
        part = self._get(reference)
        values = data.model_dump(exclude={"stock_quantity"})
        stmt = update(Part).where(Part.reference == reference)
        if data.stock_quantity is not None:
            # Column query, so a stale identity-map value is never used
            current = self.db.query(Part.stock_quantity).filter(Part.reference == reference).scalar()
            stmt = stmt.where(Part.stock_quantity == current)
            values["stock_quantity"] = data.stock_quantity

        try:
            result = self.db.execute(stmt.values(**values).execution_options(synchronize_session=False))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to update part %s", reference)
            raise StoreError(f"Failed to update part {reference}: {e}") from e
        if result.rowcount == 0:
            self.db.rollback()
            if data.stock_quantity is None:
                raise PartNotFound(reference)
            logger.warning("Update of %s rejected: stock changed concurrently", reference)
            raise StockChanged(reference)
        self._commit("update", reference)
        self.db.refresh(part)
        logger.info("Part %s updated", reference)
        return part

    def delete(self, reference: str) -> None:
        # Movements are kept; they show up with no part name afterwards
        part = self._get(reference)
        self.db.delete(part)
        self._commit("delete", reference)
        logger.info("Part %s deleted", reference)
