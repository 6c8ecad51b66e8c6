from __future__ import annotations

import pytest
from sqlalchemy import func, select

from factories import category_payload, menu_item_payload
from qrmenu.core.exceptions import CategoryInUseError, ReferentialIntegrityError
from qrmenu.crud.menu import category, menu_item
from qrmenu.models.menu import Category, MenuItem
from qrmenu.schemas.menu import CategoryUpdate


async def test_create_category_applies_defaults(db):
    created = await category.create_category(db, category_payload(description=None))

    assert created.id is not None
    assert created.name == "Appetizers"
    assert created.description is None
    assert created.display_order == 0
    assert created.is_active is True
    assert created.created_at is not None
    assert created.updated_at is not None


async def test_get_categories_only_active_in_display_order(db):
    mains = await category.create_category(db, category_payload(name="Mains", display_order=2))
    starters = await category.create_category(db, category_payload(name="Starters", display_order=1))
    sides = await category.create_category(db, category_payload(name="Sides", display_order=2))
    await category.create_category(db, category_payload(name="Hidden", display_order=0, is_active=False))

    result = await category.get_categories(db)

    assert [c.id for c in result] == [starters.id, mains.id, sides.id]


async def test_get_category_missing_returns_none(db):
    assert await category.get_category(db, 999999) is None


async def test_update_category_changes_only_present_fields(db):
    created = await category.create_category(db, category_payload(display_order=3))

    updated = await category.update_category(db, created.id, CategoryUpdate(name="Starters"))

    assert updated.name == "Starters"
    assert updated.description == "Small plates"
    assert updated.display_order == 3


async def test_update_category_explicit_null_clears_description(db):
    created = await category.create_category(db, category_payload())

    updated = await category.update_category(db, created.id, CategoryUpdate(description=None))

    assert updated.description is None


async def test_update_category_without_fields_still_touches_timestamp(db):
    created = await category.create_category(db, category_payload())
    before = created.updated_at

    updated = await category.update_category(db, created.id, CategoryUpdate())

    assert updated.name == "Appetizers"
    assert updated.updated_at > before


async def test_update_category_unknown_id_returns_none(db):
    assert await category.update_category(db, 999999, CategoryUpdate(name="X")) is None


async def test_delete_category_unknown_id_returns_false(db):
    assert await category.delete_category(db, 999999) is False


async def test_delete_empty_category(db):
    created = await category.create_category(db, category_payload())

    assert await category.delete_category(db, created.id) is True
    assert await category.get_category(db, created.id) is None


async def test_delete_category_with_items_is_refused(db):
    created = await category.create_category(db, category_payload())
    for name in ("Soup", "Salad", "Bread"):
        await menu_item.create_menu_item(db, menu_item_payload(created.id, name=name))

    with pytest.raises(CategoryInUseError) as excinfo:
        await category.delete_category(db, created.id)

    err = excinfo.value
    assert isinstance(err, ReferentialIntegrityError)
    assert err.category_id == created.id
    assert err.item_count == 3
    assert f"id {created.id}" in str(err)
    assert "3 menu items" in str(err)

    assert await category.get_category(db, created.id) is not None
    remaining = await db.execute(
        select(func.count(MenuItem.id)).where(MenuItem.category_id == created.id)
    )
    assert remaining.scalar_one() == 3


async def test_delete_category_after_items_removed(db):
    created = await category.create_category(db, category_payload())
    item = await menu_item.create_menu_item(db, menu_item_payload(created.id))

    with pytest.raises(CategoryInUseError):
        await category.delete_category(db, created.id)

    assert await menu_item.delete_menu_item(db, item.id) is True
    assert await category.delete_category(db, created.id) is True

    count = await db.execute(select(func.count(Category.id)))
    assert count.scalar_one() == 0


async def test_delete_category_item_added_after_count_is_refused(db, monkeypatch):
    created = await category.create_category(db, category_payload())
    await menu_item.create_menu_item(db, menu_item_payload(created.id, name="Soup"))
    category_id = created.id

    real_count = category.count_menu_items
    calls = []

    async def stale_first_count(session, target_id):
        calls.append(target_id)
        if len(calls) == 1:
            return 0
        return await real_count(session, target_id)

    monkeypatch.setattr(category, "count_menu_items", stale_first_count)

    with pytest.raises(CategoryInUseError) as excinfo:
        await category.delete_category(db, category_id)

    assert excinfo.value.item_count == 1
    assert len(calls) == 2
    assert await category.get_category(db, category_id) is not None
    remaining = await db.execute(
        select(func.count(MenuItem.id)).where(MenuItem.category_id == category_id)
    )
    assert remaining.scalar_one() == 1
