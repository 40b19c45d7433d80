"""Value classification: how a value takes part in matching.

Every value falls into exactly one bucket:
- primitive: None, bool, int, float, str, bytes (exact types only)
- value-class: compared by underlying value (subclasses of primitives,
  enum members, datetimes, decimals, fractions, UUIDs, sets)
- regex: compiled ``re.Pattern``, compared by source and flags
- structural: everything else, compared key by key

The predicates here never raise. Value comparison propagates errors from a
value's own ``__eq__``.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import math
import re
import types
import uuid
from collections.abc import Mapping, Sequence
from decimal import Decimal
from fractions import Fraction
from typing import Any

_PRIMITIVE_TYPES: frozenset[type] = frozenset({type(None), bool, int, float, str, bytes})

# Base types whose subclasses are compared through the base value.
_PRIMITIVE_BASES: tuple[type, ...] = (bool, int, float, str, bytes)

_VALUE_CLASSES: tuple[type, ...] = (
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    Decimal,
    Fraction,
    complex,
    uuid.UUID,
    set,
    frozenset,
    bytearray,
)

# Objects without own keys; compared by identity.
_OPAQUE: tuple[type, ...] = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)

_MISSING = object()


def is_primitive(v: object) -> bool:
    """True for None, bool, int, float (NaN included), str and bytes.

    Subclass instances such as ``IntEnum`` members are not primitives.
    """
    return type(v) in _PRIMITIVE_TYPES


def is_value_class(v: object) -> bool:
    """True for objects compared by underlying value instead of by key."""
    if is_primitive(v):
        return False
    return isinstance(v, _VALUE_CLASSES) or isinstance(v, _PRIMITIVE_BASES)


def is_regex(v: object) -> bool:
    return isinstance(v, re.Pattern)


def is_structural(v: object) -> bool:
    """True for values matched key by key (mappings, sequences, instances)."""
    return not (is_primitive(v) or is_value_class(v) or is_regex(v))


def is_nan(v: object) -> bool:
    return type(v) is float and math.isnan(v)


def _kind(v: object) -> str:
    """Equality kind of a primitive. int and float share the "number" kind."""
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "boolean"
    if isinstance(v, int | float):
        return "number"
    if isinstance(v, str):
        return "string"
    return "bytes"


def primitive_equal(a: object, b: object) -> bool:
    """Strict equality between two primitives.

    Values of different kinds never compare equal, so ``True != 1`` and
    ``"a" != b"a"``. NaN equals NaN.
    """
    if _kind(a) != _kind(b):
        return False
    if is_nan(a) and is_nan(b):
        return True
    return a == b


def value_of(v: Any) -> Any:
    """Underlying value of a value-class object."""
    if isinstance(v, enum.Enum):
        return v.value
    if not is_primitive(v):
        for base in _PRIMITIVE_BASES:
            if isinstance(v, base):
                return base(v)
    return v


def value_equal(a: Any, b: Any) -> bool:
    """Compare two values where at least one is a value-class or regex.

    Regexes compare by pattern source and flags. Anything else compares by
    underlying value; the kind of wrapper is not checked.
    """
    a_regex, b_regex = is_regex(a), is_regex(b)
    if a_regex and b_regex:
        return bool(a.pattern == b.pattern and a.flags == b.flags)
    if a_regex or b_regex:
        return False
    av, bv = value_of(a), value_of(b)
    if is_primitive(av) and is_primitive(bv):
        return primitive_equal(av, bv)
    return bool(av == bv)


def type_name(v: object) -> str:
    """The ``typeof`` of a value.

    One of: null, boolean, number, string, bytes, function, object.
    """
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "boolean"
    if isinstance(v, int | float):
        return "number"
    if isinstance(v, str):
        return "string"
    if isinstance(v, bytes):
        return "bytes"
    if callable(v):
        return "function"
    return "object"


# ═══════════════════════════════════════════════════════════════════════════════
# Own-key access
# ═══════════════════════════════════════════════════════════════════════════════


def _is_sequence(v: object) -> bool:
    return isinstance(v, Sequence) and not isinstance(v, str | bytes | bytearray)


def _attributes(v: object) -> dict[str, Any] | None:
    """Instance attributes of an object, or None if it stores none."""
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return {f.name: getattr(v, f.name) for f in dataclasses.fields(v)}
    if isinstance(v, _OPAQUE):
        return None
    attrs = getattr(v, "__dict__", None)
    if isinstance(attrs, dict):
        return attrs
    slots: dict[str, Any] = {}
    for cls in type(v).__mro__:
        names = cls.__dict__.get("__slots__", ())
        for name in (names,) if isinstance(names, str) else names:
            if name.startswith("__"):
                continue
            value = getattr(v, name, _MISSING)
            if value is not _MISSING and name not in slots:
                slots[name] = value
    return slots or None


def has_keys(v: object) -> bool:
    """True if the value exposes own keys (mapping, sequence or attributes)."""
    if isinstance(v, Mapping) or _is_sequence(v):
        return True
    return _attributes(v) is not None


def own_keys(v: object) -> list[Any]:
    """The own keys of a value: mapping keys, sequence indices or attributes."""
    if isinstance(v, Mapping):
        return list(v.keys())
    if _is_sequence(v):
        return list(range(len(v)))
    if is_primitive(v) or is_value_class(v) or is_regex(v):
        return []
    attrs = _attributes(v)
    return list(attrs) if attrs else []


def lookup(v: object, key: Any) -> tuple[bool, Any]:
    """Look up an own key. Returns ``(found, value)``."""
    if isinstance(v, Mapping):
        if key in v:
            return True, v[key]
        return False, None
    if _is_sequence(v):
        if type(key) is int and 0 <= key < len(v):
            return True, v[key]
        return False, None
    if is_primitive(v) or is_value_class(v) or is_regex(v):
        return False, None
    attrs = _attributes(v)
    if attrs is not None and key in attrs:
        return True, attrs[key]
    return False, None
