from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from qrmenu.schemas.menu import (
    CategoryCreate,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemUpdate,
    MenuThemeCreate,
    MenuThemeUpdate,
    QRCodeCreate,
    QRCodeUpdate,
)

THEME = {
    "restaurant_name": "Cafe Aroma",
    "button_color": "#ff5733",
    "button_shape": "pill",
    "background_type": "image",
    "background_value": "https://cdn.example.com/bg.png",
    "border_radius": 0,
    "primary_color": "#ABCDEF",
    "text_color": "#000000",
}


def error_fields(excinfo) -> set:
    return {err["loc"][0] for err in excinfo.value.errors() if err["loc"]}


def test_category_create_defaults():
    payload = CategoryCreate(name="Desserts")

    assert payload.description is None
    assert payload.display_order == 0
    assert payload.is_active is True


def test_category_name_must_not_be_empty():
    with pytest.raises(ValidationError) as excinfo:
        CategoryCreate(name="")
    assert "name" in error_fields(excinfo)


def test_update_distinguishes_absent_from_null():
    absent = CategoryUpdate(name="Desserts")
    cleared = CategoryUpdate(description=None)

    assert absent.changes() == {"name": "Desserts"}
    assert cleared.changes() == {"description": None}


@pytest.mark.parametrize(
    "payload",
    [
        {"name": None},
        {"display_order": None},
        {"is_active": None},
    ],
)
def test_update_rejects_null_for_required_columns(payload):
    with pytest.raises(ValidationError):
        CategoryUpdate(**payload)


def test_menu_item_create_defaults_and_price():
    payload = MenuItemCreate(name="Soup", price=12.99, category_id=1)

    assert payload.price == Decimal("12.99")
    assert payload.dietary_labels == []
    assert payload.is_available is True
    assert payload.display_order == 0
    assert payload.description is None


@pytest.mark.parametrize("price", [0, -1, "0.004", "123456789.99", "99999999.995", "NaN"])
def test_menu_item_price_constraints(price):
    with pytest.raises(ValidationError) as excinfo:
        MenuItemCreate(name="Soup", price=price, category_id=1)
    assert "price" in error_fields(excinfo)


@pytest.mark.parametrize(
    "price,expected",
    [
        ("12.999", Decimal("13.00")),
        ("1.005", Decimal("1.01")),
        (0.1 + 0.2, Decimal("0.30")),
        ("0.005", Decimal("0.01")),
        ("99999999.99", Decimal("99999999.99")),
    ],
)
def test_menu_item_price_rounded_to_cents(price, expected):
    payload = MenuItemCreate(name="Soup", price=price, category_id=1)

    assert payload.price == expected
    assert payload.price.as_tuple().exponent == -2


def test_menu_item_update_price_rounded_to_cents():
    assert MenuItemUpdate(price=9.999).changes() == {"price": Decimal("10.00")}


def test_menu_item_rejects_unknown_dietary_label():
    with pytest.raises(ValidationError) as excinfo:
        MenuItemCreate(name="Soup", price=5, category_id=1, dietary_labels=["paleo"])
    assert "dietary_labels" in error_fields(excinfo)


def test_menu_item_dietary_labels_stored_as_plain_strings():
    payload = MenuItemCreate(name="Soup", price=5, category_id=1, dietary_labels=["gluten-free", "vegan"])

    assert payload.dietary_labels == ["gluten-free", "vegan"]
    assert all(type(label) is str for label in payload.dietary_labels)


@pytest.mark.parametrize("url", ["not a url", "/relative/path.png", ""])
def test_menu_item_image_url_must_be_absolute(url):
    with pytest.raises(ValidationError) as excinfo:
        MenuItemCreate(name="Soup", price=5, category_id=1, image_url=url)
    assert "image_url" in error_fields(excinfo)


def test_menu_item_image_url_kept_verbatim():
    payload = MenuItemCreate(name="Soup", price=5, category_id=1, image_url="https://cdn.example.com")

    assert payload.image_url == "https://cdn.example.com"


def test_menu_item_update_nullable_fields():
    payload = MenuItemUpdate(description=None, ingredients=None, image_url=None)

    assert payload.changes() == {"description": None, "ingredients": None, "image_url": None}

    with pytest.raises(ValidationError):
        MenuItemUpdate(price=None)
    with pytest.raises(ValidationError):
        MenuItemUpdate(dietary_labels=None)


def test_menu_item_update_empty_labels_is_a_change():
    assert MenuItemUpdate(dietary_labels=[]).changes() == {"dietary_labels": []}


def test_theme_accepts_case_insensitive_colors():
    payload = MenuThemeCreate(**THEME)

    assert payload.is_active is True
    assert payload.button_shape == "pill"
    assert payload.background_type == "image"


@pytest.mark.parametrize(
    "field,value",
    [
        ("button_color", "red"),
        ("primary_color", "#12345"),
        ("text_color", "123456"),
        ("button_shape", "circle"),
        ("background_type", "video"),
        ("background_value", ""),
        ("border_radius", 51),
        ("border_radius", -1),
    ],
)
def test_theme_field_constraints(field, value):
    with pytest.raises(ValidationError) as excinfo:
        MenuThemeCreate(**{**THEME, field: value})
    assert field in error_fields(excinfo)


def test_theme_background_value_not_cross_checked():
    payload = MenuThemeCreate(**{**THEME, "background_type": "color", "background_value": "sunset"})

    assert payload.background_value == "sunset"


def test_theme_update_partial():
    assert MenuThemeUpdate(is_active=True).changes() == {"is_active": True}
    with pytest.raises(ValidationError):
        MenuThemeUpdate(border_radius=100)


def test_qr_code_inputs_have_no_image_url():
    payload = QRCodeCreate(
        name="Table 1",
        menu_url="https://menu.example.com",
        qr_code_url="https://evil.example.com/qr.png",
    )

    assert "qr_code_url" not in payload.model_dump()
    assert "qr_code_url" not in QRCodeUpdate.model_fields


def test_qr_code_menu_url_required_and_absolute():
    with pytest.raises(ValidationError):
        QRCodeCreate(name="Table 1")
    with pytest.raises(ValidationError):
        QRCodeCreate(name="Table 1", menu_url="menu.example.com")
