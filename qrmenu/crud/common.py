from datetime import datetime, timedelta
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from qrmenu.core.exceptions import StoreError

log = logging.getLogger(__name__)


def next_timestamp(previous: datetime = None) -> datetime:
    """UTC now, bumped past ``previous`` so updated_at strictly increases."""
    now = datetime.utcnow()
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


async def commit_or_raise(db: AsyncSession, action: str) -> None:
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        log.exception("%s: commit failed", action)
        raise StoreError(f"{action} failed") from exc


async def flush_or_raise(db: AsyncSession, action: str) -> None:
    """Flush pending writes. IntegrityError is left for the caller to map."""
    try:
        await db.flush()
    except IntegrityError:
        raise
    except SQLAlchemyError as exc:
        await db.rollback()
        log.exception("%s: flush failed", action)
        raise StoreError(f"{action} failed") from exc
