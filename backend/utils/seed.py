# backend/utils/seed.py
import logging
from typing import Iterable

from sqlalchemy.orm import Session

from models.user import User

logger = logging.getLogger(__name__)


def seed_users(db: Session, names: Iterable[str]) -> int:
    """Insert every configured operator that is not in the table yet.

    Existing rows are never removed, so running it at every start is safe.
    Returns the number of users added.
    """
    existing = {name for (name,) in db.query(User.name).all()}
    added = 0
    for raw in names:
        name = raw.strip()
        if not name or name in existing:
            continue
        db.add(User(name=name))
        existing.add(name)
        added += 1
    db.commit()

    if added:
        logger.info("Seeded %s user(s)", added)
    return added
