"""Deep equality, the comparison behind ``exactly()``.

Unlike structural matching this is symmetric and total: both sides must
have the same own keys with deeply equal values. Types and class hierarchies
are ignored, so a dict can equal an instance with the same attributes.

Cyclic structures are not supported and recurse until RecursionError.
"""

from __future__ import annotations

from typing import Any

from smatch._classify import (
    has_keys,
    is_primitive,
    is_regex,
    is_value_class,
    lookup,
    own_keys,
    primitive_equal,
    value_equal,
)


def deep_equal(a: Any, b: Any) -> bool:
    """Return True if ``a`` and ``b`` are deeply equal."""
    a_prim, b_prim = is_primitive(a), is_primitive(b)
    if a_prim and b_prim:
        return primitive_equal(a, b)
    if a_prim or b_prim:
        return False

    if is_regex(a) or is_regex(b) or is_value_class(a) or is_value_class(b):
        return value_equal(a, b)

    if not (has_keys(a) and has_keys(b)):
        return a is b

    a_keys = own_keys(a)
    if len(a_keys) != len(own_keys(b)):
        return False

    for key in a_keys:
        found, b_item = lookup(b, key)
        if not found:
            return False
        _, a_item = lookup(a, key)
        if not deep_equal(a_item, b_item):
            return False
    return True
