from typing import Annotated, ClassVar, FrozenSet

from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter, model_validator

_any_url = TypeAdapter(AnyUrl)


def _check_absolute_url(value: str) -> str:
    # Validate with pydantic but keep the caller's string as-is (no trailing-slash normalization)
    try:
        _any_url.validate_python(value)
    except ValueError:
        raise ValueError("must be a valid absolute URL")
    return value


AbsoluteUrl = Annotated[str, AfterValidator(_check_absolute_url)]
HexColor = Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{6}$")]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class PartialUpdate(BaseModel):
    """Base for update payloads.

    A field left out of the payload is not in ``model_fields_set`` and is
    left unchanged. A field sent as ``null`` is in the set and clears the
    column, which is only allowed for names listed in ``nullable_fields``.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self):
        for name in sorted(self.model_fields_set):
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

    class Config:
        use_enum_values = True
