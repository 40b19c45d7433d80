"""Dispatcher with first-match-wins semantics.

``dispatch(subject, register_cases)`` calls ``register_cases`` once with a
``case`` function. Each ``case(matcher, handler)`` call is evaluated
immediately, in registration order:

- Pending: classify the matcher and test it against the subject. On
  success, compute the result from the handler and become Resolved.
- Resolved: the registration is a no-op. Neither its matcher nor its
  handler is ever consulted.

INV: First-match-wins. At most one handler runs per dispatch.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from smatch._classify import is_primitive, primitive_equal
from smatch._structural import raw_equal, spread_extractions, structural_match
from smatch._types import (
    ANY,
    MISS,
    Literal,
    MatcherKind,
    Predicate,
    Raw,
    Template,
    Wildcard,
)

type CaseFn = Callable[..., None]


class MatchError(Exception):
    """Errors raised by smatch."""


class InvalidArgumentError(MatchError, TypeError):
    """An argument given at the API boundary has the wrong type."""

    def __init__(self, name: str, expected: str, got: object) -> None:
        self.name = name
        self.expected = expected
        self.got = type(got).__name__
        super().__init__(f"{name} must be {expected}, got {self.got}")


def classify_matcher(value: Any) -> MatcherKind:
    """Classify a registered matcher value into its matcher variant.

    Classes become isinstance predicates. Any other non-primitive,
    non-callable value is a structural template.
    """
    if value is ANY:
        return Wildcard()
    if is_primitive(value):
        return Literal(value)
    if isinstance(value, type):
        cls = value
        return Predicate(lambda v: isinstance(v, cls))
    if callable(value):
        return Predicate(value)
    return Template(value)


def evaluate_matcher(kind: MatcherKind, subject: Any) -> list[Any] | None:
    """Test one classified matcher against the subject.

    Returns the positional handler arguments on success, None on failure.
    """
    match kind:
        case Wildcard():
            return []
        case Literal(value=v):
            if is_primitive(subject) and primitive_equal(v, subject):
                return []
            return None
        case Predicate(fn=fn):
            return [] if fn(subject) else None
        case Template(value=Raw(value=payload)):
            return [] if raw_equal(payload, subject) else None
        case Template(value=template):
            extractions = structural_match(subject, template, {})
            if extractions is None:
                return None
            return spread_extractions(extractions)
    return None  # pragma: no cover


def dispatch(subject: Any, register_cases: Callable[[CaseFn], object]) -> Any:
    """Match ``subject`` against the cases registered by ``register_cases``.

    Returns the result of the first successful case, or MISS.

    Raises:
        InvalidArgumentError: If ``register_cases`` is not callable.
    """
    if not callable(register_cases):
        raise InvalidArgumentError("register_cases", "callable", register_cases)

    result: Any = MISS
    resolved = False

    def case(matcher: Any, handler: Any = None) -> None:
        nonlocal result, resolved
        if resolved:
            return
        args = evaluate_matcher(classify_matcher(matcher), subject)
        if args is None:
            return
        resolved = True
        result = handler(*args) if callable(handler) else handler

    register_cases(case)
    return result
