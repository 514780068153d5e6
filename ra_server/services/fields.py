"""Per-resource field descriptors and value coercion.

Query strings deliver every value as text while JSON bodies deliver native
types, so both go through :func:`coerce_value`, which understands either.

Coercers exist for ``str``, ``int``, ``float`` and ``bool``. A resource opts
into one by declaring ``FieldSpec(attribute, <type>)``; the bundled users and
posts resources only need ``str`` and ``int``, the other two are there for
resources that carry numeric or flag columns. Integers are bounded to the
signed 64-bit range of a BIGINT column.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ra_server.core.errors import ValidationError, bad_field_value

TRUE_VALUES = {"1", "true", "yes", "y", "on"}
FALSE_VALUES = {"0", "false", "no", "n", "off"}

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class FieldSpec:
    """Maps a public (camelCase) field name onto an ORM attribute."""

    attribute: str
    python_type: type = str
    nullable: bool = True
    patchable: bool = True


def _coerce_bool(field_name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise bad_field_value(field_name, "boolean")


def _parse_int(field_name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise bad_field_value(field_name, "integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise bad_field_value(field_name, "integer")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise bad_field_value(field_name, "integer")


def _coerce_int(field_name: str, value: Any) -> int:
    parsed = _parse_int(field_name, value)
    if not INT64_MIN <= parsed <= INT64_MAX:
        raise bad_field_value(field_name, "integer out of range")
    return parsed


def _coerce_float(field_name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise bad_field_value(field_name, "number")
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip().replace(",", "."))
    except (TypeError, ValueError):
        raise bad_field_value(field_name, "number")


def _coerce_str(field_name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    raise bad_field_value(field_name, "string")


_COERCERS = {
    bool: _coerce_bool,
    int: _coerce_int,
    float: _coerce_float,
    str: _coerce_str,
}


def coerce_value(field_name: str, spec: FieldSpec, value: Any) -> Any:
    coercer = _COERCERS.get(spec.python_type)
    if coercer is None:
        return value
    return coercer(field_name, value)


def coerce_patch(fields: Mapping[str, FieldSpec], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a partial JSON payload into ``{orm_attribute: value}``.

    Keys that are not patchable fields of the resource are dropped. A value
    that cannot be coerced fails the whole patch.
    """
    values: dict[str, Any] = {}
    for key, value in patch.items():
        spec = fields.get(key)
        if spec is None or not spec.patchable:
            continue
        if value is None:
            if not spec.nullable:
                raise ValidationError(f'Field "{key}" cannot be null')
            values[spec.attribute] = None
            continue
        values[spec.attribute] = coerce_value(key, spec, value)
    return values
