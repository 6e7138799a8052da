"""Load user-authored rules from a YAML document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from fastsecret.severity import Severity
from fastsecret.utils import read_yaml_file

from . import Rule, RuleSet

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "pattern")


class LoadError(ValueError):
    """Raised when a custom rule document cannot be read or decoded."""


def load_custom_rules(source: Union[str, Path]) -> RuleSet:
    """Parse ``source`` into a list of rules.

    The document must be a YAML list of mappings with string ``name`` and
    ``pattern`` fields; ``severity`` defaults to medium and ``description`` to
    ``None``. Any defect fails the whole load, so callers never see a partial
    rule set. Patterns are not compiled here.
    """

    path = Path(source)
    if not path.exists():
        raise LoadError(f"Rules file not found: {path}")

    try:
        raw = read_yaml_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Cannot read rules file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise LoadError(f"Malformed YAML in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise LoadError(f"Rules file {path} must contain a list of rules")

    rules = [_parse_rule(entry, index) for index, entry in enumerate(raw, start=1)]
    logger.debug("Loaded %d custom rules from %s", len(rules), path)
    return rules


def _parse_rule(entry: Any, index: int) -> Rule:
    if not isinstance(entry, dict):
        raise LoadError(f"Rule #{index} must be a mapping, got {type(entry).__name__}")

    for key in REQUIRED_FIELDS:
        if key not in entry:
            raise LoadError(f"Rule #{index} is missing '{key}'")
        if not isinstance(entry[key], str):
            raise LoadError(f"Rule #{index}: '{key}' must be a string")

    return Rule(
        name=entry["name"],
        pattern=entry["pattern"],
        severity=_parse_severity(entry.get("severity"), index),
        description=_parse_description(entry.get("description"), index),
    )


def _parse_severity(value: Any, index: int) -> Severity:
    if value is None:
        return Severity.MEDIUM
    if not isinstance(value, str):
        raise LoadError(f"Rule #{index}: 'severity' must be a string")
    try:
        return Severity.parse(value)
    except ValueError as exc:
        raise LoadError(f"Rule #{index}: {exc}") from exc


def _parse_description(value: Any, index: int) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise LoadError(f"Rule #{index}: 'description' must be a string")
    return value
