"""Errors raised by the menu services.

Lookups that miss are not errors: get/update/delete/regenerate return ``None``
or ``False`` for an unknown id. Input validation is pydantic's job and
surfaces as ``pydantic.ValidationError``.
"""


class MenuAdminError(Exception):
    """Base class for service-level failures."""


class ConflictError(MenuAdminError):
    """The operation conflicts with the current state of the store."""


class ReferentialIntegrityError(ConflictError):
    """A relationship between menu items and categories would be broken."""


class MissingCategoryError(ReferentialIntegrityError):
    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category with id {category_id} does not exist")


class CategoryInUseError(ReferentialIntegrityError):
    def __init__(self, category_id: int, item_count: int):
        self.category_id = category_id
        self.item_count = item_count
        super().__init__(
            f"Cannot delete category with id {category_id} because it has "
            f"{item_count} menu items. Delete the menu items first."
        )


class StoreError(MenuAdminError):
    """Opaque persistence failure (connectivity, unexpected constraint, ...)."""
