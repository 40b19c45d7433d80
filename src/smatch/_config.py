"""Declarative case tables.

A case table is the data form of a ``match`` call: an ordered list of
``when``/``then`` pairs plus an optional default. The same dict shape can come
from JSON or YAML. Config-driven construction path:
  dict → parse_case_table() → CaseTableConfig → load_case_table() → CaseTable

Relationship to runtime behaviour:

| Config type          | Runtime matcher            |
|----------------------|----------------------------|
| LiteralWhen          | primitive literal          |
| AnyWhen              | ANY                        |
| TypeOfWhen           | type_of(name)              |
| OneOfWhen            | one_of(*values)            |
| ExactlyWhen          | exactly(value)             |
| TemplateWhen         | structural template        |
| RegexWhen            | regex(pattern)             |

A ``then`` that is an extraction token (``"$0"``) resolves to the value
extracted at that position; any other ``then`` is returned as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from smatch._classify import is_primitive
from smatch._dispatch import MatchError, dispatch
from smatch._helpers import exactly, one_of, regex, type_of
from smatch._structural import extraction_index
from smatch._types import ANY

if TYPE_CHECKING:
    from smatch._dispatch import CaseFn

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_CASES = 256
MAX_REGEX_PATTERN_LENGTH = 4096

TYPE_NAMES = frozenset({"null", "boolean", "number", "string", "bytes", "function", "object"})

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(MatchError):
    """Error parsing a config dict into config types."""


class TooManyCasesError(MatchError):
    """Case table has too many cases (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many cases: {count} exceeds maximum {max_}")


class PatternTooLongError(MatchError):
    """A regex pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LiteralWhen:
    value: Any


@dataclass(frozen=True, slots=True)
class AnyWhen:
    pass


@dataclass(frozen=True, slots=True)
class TypeOfWhen:
    name: str


@dataclass(frozen=True, slots=True)
class OneOfWhen:
    values: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class ExactlyWhen:
    value: Any


@dataclass(frozen=True, slots=True)
class TemplateWhen:
    value: Any


@dataclass(frozen=True, slots=True)
class RegexWhen:
    pattern: str


type WhenConfig = (
    LiteralWhen | AnyWhen | TypeOfWhen | OneOfWhen | ExactlyWhen | TemplateWhen | RegexWhen
)


@dataclass(frozen=True, slots=True)
class CaseConfig:
    """One ``when``/``then`` pair."""

    when: WhenConfig
    then: Any = None


@dataclass(frozen=True, slots=True)
class CaseTableConfig:
    """Configuration for a CaseTable.

    ``has_default`` distinguishes an explicit ``default: null`` from no
    default at all.
    """

    cases: tuple[CaseConfig, ...]
    default: Any = None
    has_default: bool = False


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_WHEN_KEYS = frozenset({"literal", "any", "type_of", "one_of", "exactly", "template", "regex"})


def parse_case_table(data: dict[str, Any]) -> CaseTableConfig:
    """Parse a dict into a CaseTableConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_cases = data.get("cases")
    if raw_cases is None:
        msg = "missing required field 'cases'"
        raise ConfigParseError(msg)
    if not isinstance(raw_cases, list):
        msg = f"'cases' must be a list, got {type(raw_cases).__name__}"
        raise ConfigParseError(msg)

    unknown = sorted(set(data) - {"cases", "default"})
    if unknown:
        msg = f"unknown case table fields: {unknown}"
        raise ConfigParseError(msg)

    cases = tuple(_parse_case(c) for c in raw_cases)
    return CaseTableConfig(
        cases=cases, default=data.get("default"), has_default="default" in data
    )


def _parse_case(data: dict[str, Any]) -> CaseConfig:
    if not isinstance(data, dict):
        msg = f"case must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if "when" not in data:
        msg = "case missing required field 'when'"
        raise ConfigParseError(msg)
    return CaseConfig(when=_parse_when(data["when"]), then=data.get("then"))


def _parse_when(data: dict[str, Any]) -> WhenConfig:
    """Parse a ``when`` dict. Exactly one recognised key must be present."""
    if not isinstance(data, dict):
        msg = f"when must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    keys = sorted(set(data) & _WHEN_KEYS)
    if len(keys) != 1 or len(data) != 1:
        expected = sorted(_WHEN_KEYS)
        msg = f"when must contain exactly one of {expected}, got keys: {sorted(data)}"
        raise ConfigParseError(msg)

    kind = keys[0]
    value = data[kind]
    match kind:
        case "literal":
            if not is_primitive(value):
                msg = f"literal value must be a primitive, got {type(value).__name__}"
                raise ConfigParseError(msg)
            return LiteralWhen(value=value)
        case "any":
            if value is not True:
                msg = f"'any' must be true, got {value!r}"
                raise ConfigParseError(msg)
            return AnyWhen()
        case "type_of":
            if value not in TYPE_NAMES:
                msg = f"unknown type_of name: {value!r} (expected one of {sorted(TYPE_NAMES)})"
                raise ConfigParseError(msg)
            return TypeOfWhen(name=value)
        case "one_of":
            if not isinstance(value, list):
                msg = f"'one_of' must be a list, got {type(value).__name__}"
                raise ConfigParseError(msg)
            return OneOfWhen(values=tuple(value))
        case "exactly":
            return ExactlyWhen(value=value)
        case "template":
            if is_primitive(value):
                msg = f"template must be a structure, got {type(value).__name__}"
                raise ConfigParseError(msg)
            return TemplateWhen(value=value)
        case "regex":
            if not isinstance(value, str):
                msg = f"regex pattern must be a string, got {type(value).__name__}"
                raise ConfigParseError(msg)
            return RegexWhen(pattern=value)
    msg = f"unknown when kind: {kind!r}"  # pragma: no cover
    raise ConfigParseError(msg)  # pragma: no cover


# ═══════════════════════════════════════════════════════════════════════════════
# Loading (config types → runtime)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _CompiledCase:
    matcher: Any
    then: Any


@dataclass(frozen=True, slots=True)
class CaseTable:
    """Compiled case table. Immutable and safe to share between threads.

    INV: evaluate() has the same first-match-wins semantics as match().
    """

    cases: tuple[_CompiledCase, ...]

    def evaluate(self, subject: Any) -> Any:
        """Evaluate the table against a subject. Returns the result or MISS."""

        def register(case: CaseFn) -> None:
            for compiled in self.cases:
                case(compiled.matcher, _resolve_then(compiled.then))

        return dispatch(subject, register)

    def __len__(self) -> int:
        return len(self.cases)


def load_case_table(config: CaseTableConfig) -> CaseTable:
    """Compile a CaseTableConfig into a runtime CaseTable.

    Raises:
        TooManyCasesError: too many cases
        PatternTooLongError: regex pattern exceeds length limit
        MatchError: invalid regex pattern
    """
    width = len(config.cases) + (1 if config.has_default else 0)
    if width > MAX_CASES:
        raise TooManyCasesError(width, MAX_CASES)

    compiled = [_CompiledCase(_load_when(c.when), c.then) for c in config.cases]
    if config.has_default:
        compiled.append(_CompiledCase(ANY, config.default))
    return CaseTable(cases=tuple(compiled))


def _load_when(config: WhenConfig) -> Any:
    match config:
        case LiteralWhen(value=v):
            return v
        case AnyWhen():
            return ANY
        case TypeOfWhen(name=name):
            return type_of(name)
        case OneOfWhen(values=values):
            return one_of(*values)
        case ExactlyWhen(value=v):
            return exactly(v)
        case TemplateWhen(value=v):
            return v
        case RegexWhen(pattern=pattern):
            if len(pattern) > MAX_REGEX_PATTERN_LENGTH:
                raise PatternTooLongError(len(pattern), MAX_REGEX_PATTERN_LENGTH)
            return regex(pattern)
        case _:  # pragma: no cover
            msg = f"unknown when config type: {type(config).__name__}"
            raise ConfigParseError(msg)


def _resolve_then(then: Any) -> Any:
    """Turn a ``then`` value into a handler.

    Extraction tokens pick the extracted argument at that position. Callable
    values are wrapped so they are returned, not called.
    """
    index = extraction_index(then)
    if index is not None:

        def pick(*args: Any) -> Any:
            return args[index] if index < len(args) else None

        return pick
    if callable(then):
        return lambda *_: then
    return then


def load_case_table_dict(data: dict[str, Any]) -> CaseTable:
    """Parse and compile a case table dict in one step."""
    return load_case_table(parse_case_table(data))
