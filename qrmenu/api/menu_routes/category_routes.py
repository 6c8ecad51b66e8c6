from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from qrmenu.schemas.menu import (
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
    MenuItemRead,
)
from qrmenu.crud.menu import category, menu_item
from qrmenu.db import get_db

router = APIRouter()


@router.post("/", response_model=CategoryRead)
async def create_category(
    payload: CategoryCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new category"""
    return await category.create_category(db, payload)


@router.get("/", response_model=List[CategoryRead])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """Get active categories in display order"""
    return await category.get_categories(db)


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific category"""
    found = await category.get_category(db, category_id)
    if not found:
        raise HTTPException(status_code=404, detail="Category not found")
    return found


@router.get("/{category_id}/menu-items", response_model=List[MenuItemRead])
async def list_category_menu_items(category_id: int, db: AsyncSession = Depends(get_db)):
    """Get the menu items of one category"""
    return await menu_item.get_menu_items_by_category(db, category_id)


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: int,
    updates: CategoryUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a category"""
    updated = await category.update_category(db, category_id, updates)
    if not updated:
        raise HTTPException(status_code=404, detail="Category not found")
    return updated


@router.delete("/{category_id}")
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a category without menu items"""
    if not await category.delete_category(db, category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted"}
