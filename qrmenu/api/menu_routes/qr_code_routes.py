from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from qrmenu.schemas.menu import (
    QRCodeCreate,
    QRCodeUpdate,
    QRCodeRead,
)
from qrmenu.crud.menu import qr_code
from qrmenu.db import get_db

router = APIRouter()


@router.post("/", response_model=QRCodeRead)
async def create_qr_code(
    payload: QRCodeCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a QR code for a menu URL"""
    return await qr_code.create_qr_code(db, payload)


@router.get("/", response_model=List[QRCodeRead])
async def list_qr_codes(db: AsyncSession = Depends(get_db)):
    """Get all QR codes, newest first"""
    return await qr_code.get_qr_codes(db)


@router.get("/{qr_code_id}", response_model=QRCodeRead)
async def get_qr_code(qr_code_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific QR code"""
    found = await qr_code.get_qr_code(db, qr_code_id)
    if not found:
        raise HTTPException(status_code=404, detail="QR code not found")
    return found


@router.put("/{qr_code_id}", response_model=QRCodeRead)
async def update_qr_code(
    qr_code_id: int,
    updates: QRCodeUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a QR code"""
    updated = await qr_code.update_qr_code(db, qr_code_id, updates)
    if not updated:
        raise HTTPException(status_code=404, detail="QR code not found")
    return updated


@router.post("/{qr_code_id}/regenerate", response_model=QRCodeRead)
async def regenerate_qr_code(qr_code_id: int, db: AsyncSession = Depends(get_db)):
    """Issue a new image URL for the same menu URL"""
    regenerated = await qr_code.regenerate_qr_code(db, qr_code_id)
    if not regenerated:
        raise HTTPException(status_code=404, detail="QR code not found")
    return regenerated


@router.delete("/{qr_code_id}")
async def delete_qr_code(qr_code_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a QR code"""
    if not await qr_code.delete_qr_code(db, qr_code_id):
        raise HTTPException(status_code=404, detail="QR code not found")
    return {"message": "QR code deleted"}
