from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
import logging

from qrmenu.crud.common import commit_or_raise, flush_or_raise, next_timestamp
from qrmenu.models.menu import QRCode
from qrmenu.schemas.menu import QRCodeCreate, QRCodeUpdate
from qrmenu.utils.qr_codes import build_qr_code_url

log = logging.getLogger(__name__)


async def create_qr_code(db: AsyncSession, qr_code: QRCodeCreate):
    """Create a QR code whose image URL is derived from its menu URL"""
    now = next_timestamp()
    new_qr_code = QRCode(
        name=qr_code.name,
        menu_url=qr_code.menu_url,
        qr_code_url=build_qr_code_url(qr_code.menu_url),
        is_active=qr_code.is_active,
        created_at=now,
        updated_at=now,
    )
    db.add(new_qr_code)
    await commit_or_raise(db, "create_qr_code")
    await db.refresh(new_qr_code)
    log.info("create_qr_code: id=%s", new_qr_code.id)
    return new_qr_code


async def get_qr_codes(db: AsyncSession):
    """All QR codes, newest first"""
    result = await db.execute(
        select(QRCode).order_by(QRCode.created_at.desc(), QRCode.id.desc())
    )
    return result.scalars().all()


async def get_qr_code(db: AsyncSession, qr_code_id: int):
    """Get a specific QR code"""
    result = await db.execute(select(QRCode).where(QRCode.id == qr_code_id))
    return result.scalar_one_or_none()


async def update_qr_code(db: AsyncSession, qr_code_id: int, updates: QRCodeUpdate):
    """Update a QR code; a new menu URL always gets a new image URL"""
    qr_code = await get_qr_code(db, qr_code_id)
    if not qr_code:
        return None

    update_data = updates.changes()
    for key, value in update_data.items():
        setattr(qr_code, key, value)
    if "menu_url" in update_data:
        qr_code.qr_code_url = build_qr_code_url(qr_code.menu_url)
    qr_code.updated_at = next_timestamp(qr_code.updated_at)

    await commit_or_raise(db, "update_qr_code")
    await db.refresh(qr_code)
    return qr_code


async def regenerate_qr_code(db: AsyncSession, qr_code_id: int):
    """Issue a fresh image URL for the unchanged menu URL"""
    qr_code = await get_qr_code(db, qr_code_id)
    if not qr_code:
        return None

    previous_updated_at = qr_code.updated_at
    # Incremented in SQL so concurrent regenerations never read the same value
    qr_code.revision = QRCode.revision + 1
    await flush_or_raise(db, "regenerate_qr_code")
    await db.refresh(qr_code, attribute_names=["revision"])

    qr_code.qr_code_url = build_qr_code_url(qr_code.menu_url, qr_code.revision)
    qr_code.updated_at = next_timestamp(previous_updated_at)

    await commit_or_raise(db, "regenerate_qr_code")
    await db.refresh(qr_code)
    log.info("regenerate_qr_code: id=%s revision=%s", qr_code.id, qr_code.revision)
    return qr_code


async def delete_qr_code(db: AsyncSession, qr_code_id: int) -> bool:
    """Delete a QR code"""
    qr_code = await get_qr_code(db, qr_code_id)
    if not qr_code:
        return False
    await db.delete(qr_code)
    await commit_or_raise(db, "delete_qr_code")
    log.info("delete_qr_code: id=%s", qr_code_id)
    return True
