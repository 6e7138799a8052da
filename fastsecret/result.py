"""Core result data structures for the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, Iterable, List, Sequence, Tuple

from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = tuple(sorted(Severity, key=lambda severity: severity.rank, reverse=True))

# Console rendering shortens snippets further than the stored 100 characters.
DISPLAY_SNIPPET_LIMIT = 80


@dataclass(frozen=True)
class Finding:
    """One match of a rule against a single line of a file."""

    file: str
    line: int
    snippet: str
    rule_name: str
    severity: Severity

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    high: int = 0
    medium: int = 0
    low: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.label, getattr(self, severity.value)) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value) for severity in SEVERITY_ORDER)


@dataclass
class ScanResult:
    """Bundle the scanned root, its findings and their summary."""

    root: str = ""
    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.findings

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.severity)
        self.findings.append(finding)

    def extend(self, findings: Iterable[Finding]) -> None:
        for finding in findings:
            self.add_finding(finding)

    def to_dict(self) -> Dict[str, object]:
        return {
            "root": self.root,
            "summary": self.summary.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }

    def exit_code(self, exit_on_secrets: bool = False) -> int:
        if self.findings and exit_on_secrets:
            return 2
        return 0


def _display_snippet(snippet: str) -> str:
    if len(snippet) > DISPLAY_SNIPPET_LIMIT:
        return f"{snippet[:DISPLAY_SNIPPET_LIMIT - 3]}..."
    return snippet


def format_summary_table(result: ScanResult) -> str:
    """Create a human-readable report for console output."""

    lines: List[str] = []
    if result.findings:
        lines.append("Possible secrets found:")
        for finding in result.findings:
            lines.append(
                f"  [{finding.file}:{finding.line}] {finding.severity.label} - "
                f"{finding.rule_name} ({_display_snippet(finding.snippet)})"
            )
        lines.append("")

    lines.append("Scan Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))

    if result.passed:
        lines.append("No secrets detected.")
    else:
        lines.append(f"Found {result.summary.total} potential secret(s).")
    return "\n".join(lines)
