"""Command-line entry point for the fastsecret scanner."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ConfigError, ScanConfig, load_config, parse_ignore_list
from .engine import ScanError, scan_path
from .result import ScanResult, format_summary_table
from .rules import RuleSet
from .rules.builtin import build_rule_set
from .rules.custom import LoadError, load_custom_rules

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastsecret",
        description="Scan source code for leaked API keys, tokens, private keys and credentials.",
    )
    parser.add_argument("path", metavar="PATH", help="File or directory to scan.")
    parser.add_argument(
        "--rules",
        dest="rules_path",
        default=None,
        metavar="FILE",
        help="Load additional rules from a YAML file.",
    )
    parser.add_argument(
        "--ignore-rules",
        default="",
        metavar="RULES",
        help="Comma-separated rule names to skip.",
    )
    parser.add_argument(
        "--exit-on-secrets",
        action="store_true",
        help="Exit with code 2 when secrets are found (for CI/CD).",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Settings file (defaults to .fastsecret.yaml when present).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        default=None,
        help="Path to write a JSON report (e.g., artifacts/secrets.json).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every match.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def load_rule_set(rules_path: Optional[str], verbose: bool = False) -> RuleSet:
    """Return built-ins plus custom rules; a broken custom file only warns."""

    custom: RuleSet = []
    if rules_path:
        try:
            custom = load_custom_rules(rules_path)
        except LoadError as exc:
            logger.warning("Failed to load custom rules from '%s': %s", rules_path, exc)
        else:
            if verbose:
                logger.info("Loaded %d custom rules", len(custom))
    return build_rule_set(custom)


def run_scan(path: str, config: ScanConfig, verbose: bool = False) -> ScanResult:
    rules = load_rule_set(config.rules_path, verbose=verbose)
    result = ScanResult(root=path)
    result.extend(scan_path(path, rules, config.ignore_rules, verbose=verbose))
    return result


def write_output(result: ScanResult, output_path: Optional[str]) -> None:
    print(format_summary_table(result))

    if output_path:
        payload = json.dumps(result.to_dict(), indent=2)
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nReport written to {output_path}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config).merge(
            rules_path=args.rules_path,
            ignore_rules=parse_ignore_list(args.ignore_rules),
            exit_on_secrets=args.exit_on_secrets,
        )
        result = run_scan(args.path, config, verbose=args.verbose)
    except (ConfigError, ScanError) as exc:
        logger.error("%s", exc)
        return 1

    write_output(result, args.output_path)
    return result.exit_code(config.exit_on_secrets)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
