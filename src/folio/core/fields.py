"""Tagged-variant value type for decoded front-matter fields.

Front-matter values are restricted to three shapes:

- a scalar (``str``, ``int``, ``float``, ``bool`` or ``None``),
- a sequence of scalars,
- a mapping from string keys to scalars or sequences of scalars.

Anything nested deeper fails with :class:`UnsupportedFieldShapeError` instead
of being coerced.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeAlias

from folio.core.exceptions import UnsupportedFieldShapeError

Scalar: TypeAlias = str | int | float | bool | None
FieldValue: TypeAlias = Scalar | list[Scalar] | dict[str, Scalar | list[Scalar]]

_SCALAR_TYPES = (str, int, float, bool)


class FieldShape(str, Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, _SCALAR_TYPES)


def field_shape(value: FieldValue) -> FieldShape:
    """Classify an already decoded value."""
    if isinstance(value, list):
        return FieldShape.SEQUENCE
    if isinstance(value, dict):
        return FieldShape.MAPPING
    return FieldShape.SCALAR


def decode_field(key: str, raw: Any) -> FieldValue:
    """Decode a raw YAML value into a :data:`FieldValue`.

    Args:
        key: Top-level metadata key, used to build error paths.
        raw: Value produced by the YAML loader.

    Returns:
        The value, with tuples normalised to lists.

    Raises:
        UnsupportedFieldShapeError: If the value nests deeper than a mapping of
            sequences, or has a type the value model does not know.

    """
    if isinstance(raw, dict):
        mapping: dict[str, Scalar | list[Scalar]] = {}
        for sub_key, sub_value in raw.items():
            if not isinstance(sub_key, str):
                msg = f"mapping keys must be strings, got {type(sub_key).__name__}"
                raise UnsupportedFieldShapeError(msg, path=f"{key}.{sub_key}")
            path = f"{key}.{sub_key}"
            if isinstance(sub_value, (list, tuple)):
                mapping[sub_key] = _decode_sequence(path, sub_value)
            else:
                mapping[sub_key] = _decode_scalar(path, sub_value)
        return mapping
    if isinstance(raw, (list, tuple)):
        return _decode_sequence(key, raw)
    return _decode_scalar(key, raw)


def _decode_sequence(path: str, items: list[Any] | tuple[Any, ...]) -> list[Scalar]:
    return [_decode_scalar(f"{path}[{index}]", item) for index, item in enumerate(items)]


def _decode_scalar(path: str, value: Any) -> Scalar:
    if is_scalar(value):
        return value
    if isinstance(value, (dict, list, tuple)):
        msg = f"value nested too deeply ({type(value).__name__} at depth > 2)"
    else:
        msg = f"unsupported value type {type(value).__name__}"
    raise UnsupportedFieldShapeError(msg, path=path)
