"""Walk a file or directory and evaluate every rule against every line."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Collection, FrozenSet, Iterable, List, Pattern, Tuple, Union

from fastsecret.result import Finding
from fastsecret.rules import Rule
from fastsecret.utils import is_binary_file, iter_scan_files, read_text_file

logger = logging.getLogger(__name__)

SNIPPET_LIMIT = 100
ELLIPSIS = "..."

CompiledRule = Tuple[Rule, Pattern[str]]


class ScanError(RuntimeError):
    """Raised when a scan request cannot be processed at all."""


def scan_path(
    root: Union[str, "os.PathLike[str]"],
    rules: Iterable[Rule],
    ignore_rules: Collection[str] = (),
    verbose: bool = False,
) -> List[Finding]:
    """Scan ``root`` and return findings in file, line and rule order.

    A missing root yields no findings. Unreadable files, binary extensions and
    excluded directories are skipped silently; rules with invalid patterns are
    dropped for this scan. Only a root that is neither a file nor a directory,
    or ``rules`` / ``ignore_rules`` arguments of the wrong shape, raise
    ``ScanError``.
    """

    rule_list = _validate_rules(rules)
    ignored = _validate_ignore_rules(ignore_rules)
    root_str = os.fspath(root)
    path = Path(root_str)

    if not path.exists():
        logger.debug("Nothing to scan at %s", root_str)
        return []
    if not (path.is_file() or path.is_dir()):
        raise ScanError(f"Cannot scan {root_str}: not a regular file or directory")

    compiled = compile_rules(rule_list, ignored)
    candidates = [root_str] if path.is_file() else iter_scan_files(root_str)

    findings: List[Finding] = []
    for file_path in candidates:
        findings.extend(scan_file(file_path, compiled, verbose=verbose))
    return findings


def compile_rules(
    rules: Iterable[Rule],
    ignore_rules: Collection[str] = (),
) -> List[CompiledRule]:
    """Compile each active rule once, dropping ignored and invalid ones."""

    ignored = _validate_ignore_rules(ignore_rules)
    compiled: List[CompiledRule] = []
    for rule in rules:
        if rule.name in ignored:
            continue
        try:
            pattern = re.compile(rule.pattern)
        except re.error as exc:
            logger.warning("Invalid regex in rule '%s': %s", rule.name, exc)
            continue
        compiled.append((rule, pattern))
    return compiled


def scan_file(path: str, compiled: List[CompiledRule], verbose: bool = False) -> List[Finding]:
    """Return the findings for a single file, or none if it is skipped."""

    if is_binary_file(path):
        return []
    content = read_text_file(path)
    if content is None:
        return []

    findings: List[Finding] = []
    for line_number, line in enumerate(split_lines(content), start=1):
        for rule, pattern in compiled:
            if pattern.search(line) is None:
                continue
            findings.append(
                Finding(
                    file=path,
                    line=line_number,
                    snippet=make_snippet(line),
                    rule_name=rule.name,
                    severity=rule.severity,
                )
            )
            if verbose:
                logger.info("Matched '%s' at %s:%d", rule.name, path, line_number)
    return findings


def split_lines(content: str) -> List[str]:
    r"""Split on ``\n`` only, dropping one trailing ``\r`` per line.

    Form feeds, lone carriage returns and Unicode separators stay inside
    the line so reported line numbers match what editors show.
    """

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def make_snippet(line: str) -> str:
    """Trim ``line`` and cap it at ``SNIPPET_LIMIT`` characters."""

    text = line.strip()
    if len(text) > SNIPPET_LIMIT:
        return text[: SNIPPET_LIMIT - len(ELLIPSIS)] + ELLIPSIS
    return text


def _validate_rules(rules: Iterable[Rule]) -> List[Rule]:
    if isinstance(rules, (str, bytes)):
        raise ScanError("rules must be a sequence of Rule objects, not a string")
    try:
        rule_list = list(rules)
    except TypeError as exc:
        raise ScanError(f"rules must be a sequence of Rule objects: {exc}") from exc
    for rule in rule_list:
        if not isinstance(rule, Rule):
            raise ScanError(f"Expected Rule, got {type(rule).__name__}")
    return rule_list


def _validate_ignore_rules(ignore_rules: Collection[str]) -> FrozenSet[str]:
    if isinstance(ignore_rules, (str, bytes)):
        raise ScanError("ignore_rules must be a collection of rule names, not a single string")
    try:
        return frozenset(ignore_rules)
    except TypeError as exc:
        raise ScanError(f"ignore_rules must be a collection of rule names: {exc}") from exc
