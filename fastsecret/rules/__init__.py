"""Rule model shared by the built-in catalog, custom loader and engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from fastsecret.severity import Severity


@dataclass(frozen=True)
class Rule:
    """A named regular expression matched against single lines of text."""

    name: str
    pattern: str
    severity: Severity = Severity.MEDIUM
    description: Optional[str] = None


RuleSet = List[Rule]
