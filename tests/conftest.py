"""Conformance fixture loader for smatch.

Loads YAML fixtures from tests/fixtures/ and turns each document into a
compiled CaseTable plus the subjects to run through it. Two custom tags
extend YAML for values it cannot express natively:

    !raw "$1"        → smatch.raw("$1")
    !regex "[a-z]+"  → re.compile("[a-z]+")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from smatch import CaseTable, load_case_table_dict, raw

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single check from a conformance fixture."""

    fixture_name: str
    case_name: str
    table: CaseTable
    subject: Any
    expect: Any
    expect_miss: bool


# ─── YAML loader with smatch tags ───────────────────────────────────────────


class FixtureLoader(yaml.SafeLoader):
    """SafeLoader that understands the !raw and !regex tags."""


def _construct_raw(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        return raw(loader.construct_scalar(node))
    if isinstance(node, yaml.SequenceNode):
        return raw(loader.construct_sequence(node, deep=True))
    return raw(loader.construct_mapping(node, deep=True))


def _construct_regex(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    return re.compile(loader.construct_scalar(node))


FixtureLoader.add_constructor("!raw", _construct_raw)
FixtureLoader.add_constructor("!regex", _construct_regex)


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all conformance fixtures."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.load_all(f, Loader=FixtureLoader):  # noqa: S506
            if doc is None:
                continue
            fixture_name = doc["name"]
            table = load_case_table_dict(doc["table"])
            for check in doc["checks"]:
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=check["name"],
                        table=table,
                        subject=check.get("subject"),
                        expect=check.get("expect"),
                        expect_miss=check.get("expect_miss", False),
                    )
                )
    return cases
