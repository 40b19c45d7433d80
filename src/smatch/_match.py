"""The public ``match`` callable.

``match`` behaves like a function and carries the helper factories and
sentinels as attributes, so ``match.ANY`` and ``match.exactly(...)`` read
naturally at call sites::

    from smatch import match

    def describe(v):
        return match(v, lambda case: (
            case("foo", "You got foo"),
            case(match.type_of("string"), lambda: f"some other string: {v}"),
            case([1, "$0", "$1"], lambda a, b: a + b),
            case(match.ANY, "something else"),
        ))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, final

from smatch import _helpers
from smatch._dispatch import CaseFn, dispatch
from smatch._types import ANY, MISS


@final
class Match:
    """Callable front end for dispatch() with helpers attached."""

    __slots__ = ()

    MISS: Final = MISS
    ANY: Final = ANY

    type_of = staticmethod(_helpers.type_of)
    instance_of = staticmethod(_helpers.instance_of)
    one_of = staticmethod(_helpers.one_of)
    exactly = staticmethod(_helpers.exactly)
    raw = staticmethod(_helpers.raw)
    regex = staticmethod(_helpers.regex)

    def __call__(self, subject: Any, register_cases: Callable[[CaseFn], object]) -> Any:
        return dispatch(subject, register_cases)

    def __repr__(self) -> str:
        return "<smatch.match>"


match: Final = Match()
