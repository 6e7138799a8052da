"""Project-level scan settings read from ``.fastsecret.yaml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Optional, Union

import yaml

from fastsecret.utils import read_yaml_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".fastsecret.yaml"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ScanConfig:
    rules_path: Optional[str] = None
    ignore_rules: FrozenSet[str] = frozenset()
    exit_on_secrets: bool = False

    def merge(
        self,
        rules_path: Optional[str] = None,
        ignore_rules: Iterable[str] = (),
        exit_on_secrets: bool = False,
    ) -> "ScanConfig":
        """Overlay command-line values; ignore lists are combined."""

        return ScanConfig(
            rules_path=rules_path or self.rules_path,
            ignore_rules=self.ignore_rules | frozenset(ignore_rules),
            exit_on_secrets=exit_on_secrets or self.exit_on_secrets,
        )


def parse_ignore_list(value: Any) -> FrozenSet[str]:
    """Accept a comma-separated string or a list of rule names."""

    if value is None:
        return frozenset()
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        raise ConfigError("'ignore_rules' must be a list of rule names or a comma-separated string")
    return frozenset(str(item).strip() for item in items if str(item).strip())


def load_config(path: Optional[Union[str, Path]] = None) -> ScanConfig:
    """Load settings from ``path`` or from ``.fastsecret.yaml`` in the working directory.

    A missing default file yields default settings; a missing explicit file is an error.
    """

    config_path = Path(path) if path is not None else Path(DEFAULT_CONFIG_FILENAME)
    if not config_path.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        return ScanConfig()

    try:
        raw = read_yaml_file(config_path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot load config {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")

    rules_path = raw.get("rules")
    if rules_path is not None and not isinstance(rules_path, str):
        raise ConfigError("'rules' must be a path string")

    exit_on_secrets = raw.get("exit_on_secrets", False)
    if not isinstance(exit_on_secrets, bool):
        raise ConfigError("'exit_on_secrets' must be true or false")

    config = ScanConfig(
        rules_path=rules_path,
        ignore_rules=parse_ignore_list(raw.get("ignore_rules")),
        exit_on_secrets=exit_on_secrets,
    )
    logger.debug("Loaded config from %s: %s", config_path, config)
    return config
