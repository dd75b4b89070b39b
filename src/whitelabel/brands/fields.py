"""Typed field updates for brand records.

Editors address fields with dotted paths such as ``displayName`` or
``colors.primary``. ``parse_field_path`` turns a path plus a value into one
variant of the ``FieldUpdate`` tagged union, and ``apply_update`` produces
the edited brand. Nested updates replace a single key and keep the
siblings, so the fixed key sets of ``colors``, ``features`` and ``assets``
never change.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_snake

from whitelabel.constants import ASSET_KEYS, COLOR_KEYS, FEATURE_KEYS
from whitelabel.exceptions import InvalidFieldPathError, ValidationError

from .models import BrandConfig

TextField = Literal["appName", "displayName", "packageName", "bundleId", "version", "apiBaseUrl"]
ColorKey = Literal["primary", "secondary", "background", "surface", "text", "textSecondary"]
FeatureKey = Literal["darkMode", "analytics", "pushNotifications", "biometric"]
AssetKey = Literal["icon", "splash", "logo"]

TEXT_FIELDS = ("appName", "displayName", "packageName", "bundleId", "version", "apiBaseUrl")
GROUP_KEYS: dict[str, tuple[str, ...]] = {
    "colors": COLOR_KEYS,
    "features": FEATURE_KEYS,
    "assets": ASSET_KEYS,
}


class _Update(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextFieldUpdate(_Update):
    """Replace a top-level string field."""

    kind: Literal["text"] = "text"
    field: TextField
    value: str


class VersionCodeUpdate(_Update):
    kind: Literal["versionCode"] = "versionCode"
    value: PositiveInt


class ColorUpdate(_Update):
    kind: Literal["colors"] = "colors"
    key: ColorKey
    value: str


class FeatureUpdate(_Update):
    kind: Literal["features"] = "features"
    key: FeatureKey
    value: bool


class AssetUpdate(_Update):
    """Set or clear one embedded image."""

    kind: Literal["assets"] = "assets"
    key: AssetKey
    value: str | None


FieldUpdate = Annotated[
    Union[TextFieldUpdate, VersionCodeUpdate, ColorUpdate, FeatureUpdate, AssetUpdate],
    Field(discriminator="kind"),
]

_field_update_adapter: TypeAdapter[FieldUpdate] = TypeAdapter(FieldUpdate)

# Accepted Python types per update kind when values are not text input
_VALUE_TYPES: dict[str, type | tuple[type, ...]] = {
    "text": str,
    "versionCode": int,
    "colors": str,
    "features": bool,
    "assets": (str, type(None)),
}


def parse_field_path(path: str, value: Any, *, from_text: bool = False) -> FieldUpdate:
    """Build a typed update from a dotted field path.

    Args:
        path: ``"<field>"`` or ``"<group>.<key>"``; split on the first dot.
        value: New value for the field.
        from_text: Accept text forms such as ``"true"`` or ``"3"`` (CLI input).
            Otherwise values must already have the field's type.

    Raises:
        InvalidFieldPathError: If the path does not name an editable field.
        ValidationError: If the value does not fit the field.
    """
    group, sep, key = path.partition(".")
    if sep:
        if group not in GROUP_KEYS:
            raise InvalidFieldPathError(f"Unknown field group: '{group}'")
        if key not in GROUP_KEYS[group]:
            raise InvalidFieldPathError(
                f"Unknown key '{key}' in '{group}'",
                details=f"Expected one of: {', '.join(GROUP_KEYS[group])}",
            )
        data: dict[str, Any] = {"kind": group, "key": key, "value": value}
    elif path == "versionCode":
        data = {"kind": "versionCode", "value": value}
    elif path in TEXT_FIELDS:
        data = {"kind": "text", "field": path, "value": value}
    elif path == "id":
        raise InvalidFieldPathError("The brand id cannot be changed")
    else:
        raise InvalidFieldPathError(f"Unknown field: '{path}'")
    if from_text:
        if data["kind"] == "assets" and value in ("", "null", "none"):
            data["value"] = None
    elif not isinstance(value, _VALUE_TYPES[data["kind"]]) or (
        data["kind"] == "versionCode" and isinstance(value, bool)
    ):
        raise ValidationError(
            f"Invalid value for '{path}'",
            details=f"Unexpected type: {type(value).__name__}",
        )
    try:
        return _field_update_adapter.validate_python(data)
    except PydanticValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        raise ValidationError(f"Invalid value for '{path}'", details=errors) from e


def apply_update(brand: BrandConfig, update: FieldUpdate) -> BrandConfig:
    """Return a copy of ``brand`` with the update applied."""
    if isinstance(update, TextFieldUpdate):
        return brand.model_copy(update={to_snake(update.field): update.value})
    if isinstance(update, VersionCodeUpdate):
        return brand.model_copy(update={"version_code": update.value})
    group = getattr(brand, update.kind)
    new_group = group.model_copy(update={to_snake(update.key): update.value})
    return brand.model_copy(update={update.kind: new_group})
