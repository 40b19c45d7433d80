"""Partial structural matching with positional extraction.

A template constrains only the keys it has. Subject keys the template does
not mention are ignored, so ``{"a": 1}`` matches ``{"a": 1, "b": 2}`` and
``[1, "$0"]`` matches any sequence of length two or more starting with 1.

Template leaves that are extraction tokens (``"$0"``, ``"$1"``, ...) capture
the subject value at that position instead of constraining it.
"""

from __future__ import annotations

import re
from typing import Any

from smatch._classify import (
    is_primitive,
    is_regex,
    is_value_class,
    lookup,
    own_keys,
    primitive_equal,
    value_equal,
)
from smatch._types import Extractions, Raw

EXTRACT_TOKEN = re.compile(r"\$([0-9]+)")


def extraction_index(v: object) -> int | None:
    """Position named by an extraction token, or None if ``v`` is not one."""
    if type(v) is not str:
        return None
    m = EXTRACT_TOKEN.fullmatch(v)
    return int(m.group(1)) if m else None


def raw_equal(payload: Any, subject: Any) -> bool:
    """Compare an unwrapped raw payload against a subject value.

    Primitives compare by value; anything else must be the same object.
    """
    if is_primitive(payload) and is_primitive(subject):
        return primitive_equal(payload, subject)
    return payload is subject


def structural_match(
    subject: Any, template: Any, extractions: Extractions | None = None
) -> Extractions | None:
    """Partially match ``subject`` against ``template``.

    Returns the extraction vector (possibly empty) on success, or None on
    mismatch. ``extractions`` is filled in place when given.
    """
    if extractions is None:
        extractions = {}

    if is_value_class(template) or is_regex(template):
        if is_primitive(subject):
            return None
        return extractions if value_equal(template, subject) else None

    for key in own_keys(template):
        found, s = lookup(subject, key)
        if not found:
            return None
        _, t = lookup(template, key)

        index = extraction_index(t)
        if index is not None:
            extractions[index] = s
            continue

        if isinstance(t, Raw):
            if not raw_equal(t.value, s):
                return None
            continue

        t_prim, s_prim = is_primitive(t), is_primitive(s)
        if t_prim and s_prim:
            if not primitive_equal(t, s):
                return None
        elif t_prim or s_prim:
            return None
        elif is_value_class(t) or is_value_class(s) or is_regex(t) or is_regex(s):
            if not value_equal(t, s):
                return None
        elif structural_match(s, t, extractions) is None:
            return None

    return extractions


def spread_extractions(extractions: Extractions) -> list[Any]:
    """Positional arguments for a handler: one per position up to the highest.

    Positions that were never written are None.
    """
    if not extractions:
        return []
    return [extractions.get(i) for i in range(max(extractions) + 1)]
