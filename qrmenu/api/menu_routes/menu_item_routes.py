from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from qrmenu.schemas.menu import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemRead,
)
from qrmenu.crud.menu import menu_item
from qrmenu.db import get_db

router = APIRouter()


@router.post("/", response_model=MenuItemRead)
async def create_menu_item(
    payload: MenuItemCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new menu item"""
    return await menu_item.create_menu_item(db, payload)


@router.get("/", response_model=List[MenuItemRead])
async def list_menu_items(db: AsyncSession = Depends(get_db)):
    """Get all menu items in category and item display order"""
    return await menu_item.get_menu_items(db)


@router.get("/{item_id}", response_model=MenuItemRead)
async def get_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific menu item"""
    item = await menu_item.get_menu_item(db, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.put("/{item_id}", response_model=MenuItemRead)
async def update_menu_item(
    item_id: int,
    updates: MenuItemUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a menu item"""
    item = await menu_item.update_menu_item(db, item_id, updates)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.delete("/{item_id}")
async def delete_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a menu item"""
    if not await menu_item.delete_menu_item(db, item_id):
        raise HTTPException(status_code=404, detail="Menu item not found")
    return {"message": "Menu item deleted"}
