"""Matcher factories.

Each factory returns a plain predicate closure (or, for ``raw``, a Raw
carrier) that the dispatcher consumes like any other matcher::

    match(value, lambda case: (
        case(type_of("string"), "a string"),
        case(one_of(1, 2, 3), "small"),
        case(ANY, "something else"),
    ))

``regex`` compiles with ``google-re2`` for guaranteed linear-time matching.
RE2 does not support backreferences or lookaround; patterns using them are
rejected at construction.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import re2

from smatch._classify import is_primitive, primitive_equal, type_name
from smatch._dispatch import MatchError
from smatch._equality import deep_equal
from smatch._types import Raw


def type_of(name: str) -> Callable[[Any], bool]:
    """Predicate testing the ``typeof`` name of the subject.

    Names: null, boolean, number, string, bytes, function, object.
    None only matches ``"null"``; ``"object"`` never matches None.
    """

    def predicate(v: Any) -> bool:
        return type_name(v) == name

    return predicate


def instance_of(cls: type | tuple[type, ...]) -> Callable[[Any], bool]:
    """Predicate testing ``isinstance(subject, cls)``."""

    def predicate(v: Any) -> bool:
        return isinstance(v, cls)

    return predicate


def one_of(*values: Any) -> Callable[[Any], bool]:
    """Predicate true iff the subject is one of ``values``.

    Identity, not deep equality: primitives compare by value, objects must
    be the very same object.
    """

    def predicate(v: Any) -> bool:
        if is_primitive(v):
            return any(is_primitive(c) and primitive_equal(c, v) for c in values)
        return any(c is v for c in values)

    return predicate


def exactly(template: Any) -> Callable[[Any], bool]:
    """Predicate true iff the subject deeply equals ``template``."""

    def predicate(v: Any) -> bool:
        return deep_equal(template, v)

    return predicate


def raw(value: Any) -> Raw:
    """Mark a template leaf to be compared literally.

    Mostly used for strings that look like extraction tokens, e.g.
    ``{"price": raw("$15")}``. Objects given to raw() are compared by
    identity, not deeply.
    """
    return Raw(value)


def regex(pattern: str) -> Callable[[Any], bool]:
    """Predicate true iff the subject is a string the pattern searches.

    Uses search (not fullmatch), so the pattern may match anywhere.

    Raises:
        MatchError: If the pattern is not valid RE2 syntax.
    """
    try:
        compiled = re2.compile(pattern)
    except re2.error as e:
        msg = f'invalid regex pattern "{pattern}": {e}'
        raise MatchError(msg) from e

    def predicate(v: Any) -> bool:
        if not isinstance(v, str):
            return False
        return compiled.search(v) is not None

    return predicate
