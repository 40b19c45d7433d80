"""smatch: Scala-style structural pattern matching for Python values.

All public names are exported from this module for flat imports:

    from smatch import match, ANY, MISS, exactly, raw

    match([1, 2, 3], lambda case: (
        case([1, "$0", "$1"], lambda a, b: a + b),
        case(ANY, 0),
    ))  # -> 5
"""

__version__ = "0.1.0"

# Classifier
from smatch._classify import (
    is_primitive,
    is_regex,
    is_structural,
    is_value_class,
    primitive_equal,
    type_name,
    value_of,
)

# Case tables, see smatch._config for details
from smatch._config import (
    MAX_CASES,
    MAX_REGEX_PATTERN_LENGTH,
    AnyWhen,
    CaseConfig,
    CaseTable,
    CaseTableConfig,
    ConfigParseError,
    ExactlyWhen,
    LiteralWhen,
    OneOfWhen,
    PatternTooLongError,
    RegexWhen,
    TemplateWhen,
    TooManyCasesError,
    TypeOfWhen,
    WhenConfig,
    load_case_table,
    load_case_table_dict,
    parse_case_table,
)

# Dispatcher
from smatch._dispatch import (
    InvalidArgumentError,
    MatchError,
    classify_matcher,
    dispatch,
)
from smatch._equality import deep_equal

# Matcher factories
from smatch._helpers import exactly, instance_of, one_of, raw, regex, type_of
from smatch._match import Match, match
from smatch._structural import extraction_index, spread_extractions, structural_match
from smatch._types import (
    ANY,
    MISS,
    Extractions,
    Literal,
    MatcherKind,
    Predicate,
    Raw,
    Template,
    Wildcard,
)

__all__ = [
    # Entry point
    "match",
    "Match",
    "dispatch",
    "MISS",
    "ANY",
    # Matcher factories
    "type_of",
    "instance_of",
    "one_of",
    "exactly",
    "raw",
    "regex",
    # Matcher variants
    "Literal",
    "Wildcard",
    "Predicate",
    "Template",
    "MatcherKind",
    "Raw",
    "classify_matcher",
    # Engine
    "structural_match",
    "spread_extractions",
    "extraction_index",
    "Extractions",
    "deep_equal",
    # Classifier
    "is_primitive",
    "is_value_class",
    "is_regex",
    "is_structural",
    "primitive_equal",
    "value_of",
    "type_name",
    # Errors
    "MatchError",
    "InvalidArgumentError",
    # Case tables
    "CaseTable",
    "CaseTableConfig",
    "CaseConfig",
    "WhenConfig",
    "LiteralWhen",
    "AnyWhen",
    "TypeOfWhen",
    "OneOfWhen",
    "ExactlyWhen",
    "TemplateWhen",
    "RegexWhen",
    "ConfigParseError",
    "TooManyCasesError",
    "PatternTooLongError",
    "parse_case_table",
    "load_case_table",
    "load_case_table_dict",
    "MAX_CASES",
    "MAX_REGEX_PATTERN_LENGTH",
]
