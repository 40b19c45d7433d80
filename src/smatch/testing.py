"""Test utilities for smatch.

Provides a recording handler for observing which case fired and with what
arguments. It exists to reduce boilerplate in tests and examples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class CaseRecorder:
    """Handler that records every call and returns a fixed value.

    >>> from smatch import match
    >>> from smatch.testing import CaseRecorder
    >>> spy = CaseRecorder()
    >>> _ = match([1, 2, 3], lambda case: case([1, "$0", "$1"], spy))
    >>> spy.calls
    [(2, 3)]
    """

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def assert_called_once_with(self, *args: Any) -> None:
        if self.calls != [args]:
            msg = f"expected exactly one call with {args!r}, got {self.calls!r}"
            raise AssertionError(msg)

    def assert_not_called(self) -> None:
        if self.calls:
            msg = f"expected no calls, got {self.calls!r}"
            raise AssertionError(msg)
