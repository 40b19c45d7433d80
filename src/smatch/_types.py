"""Core types for smatch: sentinels, the raw wrapper, and the matcher union.

The matcher union mirrors the four ways a case can be interpreted:
- Literal: a primitive compared with strict, kind-aware equality
- Wildcard: matches anything
- Predicate: a callable consulted with the subject
- Template: a structural value matched partially, with extraction
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, final


@final
class _Miss:
    """Type of the MISS sentinel. Only one instance ever exists."""

    __slots__ = ()
    _instance: _Miss | None = None

    def __new__(cls) -> _Miss:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISS"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISS"

    def __copy__(self) -> _Miss:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Miss:
        return self


@final
class _Any:
    """Type of the ANY wildcard sentinel. Only one instance ever exists."""

    __slots__ = ()
    _instance: _Any | None = None

    def __new__(cls) -> _Any:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self) -> str:
        return "ANY"

    def __copy__(self) -> _Any:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Any:
        return self


MISS: Final = _Miss()
"""Returned by match() only when no case matched."""

ANY: Final = _Any()
"""Wildcard matcher, Scala's ``_``. Usually registered last."""


@dataclass(frozen=True, slots=True)
class Raw:
    """Carrier for a template leaf that must be compared literally.

    A raw string such as ``"$1"`` is not treated as an extraction token, and a
    raw object is compared by identity instead of being recursed into.
    """

    value: Any


# ═══════════════════════════════════════════════════════════════════════════════
# Matcher tagged union
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Literal:
    """Succeeds iff the subject is the same primitive."""

    value: Any


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Always succeeds."""


@dataclass(frozen=True, slots=True)
class Predicate:
    """Succeeds iff ``fn(subject)`` is truthy."""

    fn: Callable[[Any], object]


@dataclass(frozen=True, slots=True)
class Template:
    """Succeeds iff the subject partially matches the structural value."""

    value: Any


type MatcherKind = Literal | Wildcard | Predicate | Template

type Extractions = dict[int, Any]
