"""Project configuration for sf-delete-order.

Settings live in ``.sf-delete-order/config.yaml``:

    template: "delete [SELECT Id FROM {name}];"
    exclude_suffixes:
      - "__e"

Command line options take precedence over the file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from sf_delete_order.exceptions import ConfigError
from sf_delete_order.salesforce.parser import DEFAULT_EXCLUDE_SUFFIXES

import logging

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".sf-delete-order"
CONFIG_FILE_NAME = "config.yaml"


@dataclass
class OrderConfig:
    """Resolved configuration.

    Attributes:
        template: Output template, ``None`` for the bare SObject name
        exclude_suffixes: SObject name suffixes skipped when reading directories
    """

    template: str | None = None
    exclude_suffixes: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_SUFFIXES))


def default_config_path(base_dir: Path | None = None) -> Path:
    return (base_dir or Path.cwd()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(config_file: Path | None = None) -> OrderConfig:
    """Load configuration from ``config_file`` or the default location.

    A missing default file yields defaults. A missing file that was named
    explicitly is an error.

    Raises:
        ConfigError: If the file is missing (explicit path), not valid YAML,
            or holds values of the wrong type.
    """
    explicit = config_file is not None
    config_file = config_file or default_config_path()

    if not config_file.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_file}")
        logger.debug(f"No config file at {config_file}, using defaults")
        return OrderConfig()

    yaml = YAML(typ="safe")
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except YAMLError as e:
        logger.error(f"Failed to load config: {e}")
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read config: {e}")
        raise ConfigError(f"Cannot read config {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {config_file}: expected a mapping at top level")

    config = OrderConfig()

    template = data.get("template")
    if template is not None:
        if not isinstance(template, str):
            raise ConfigError(f"Invalid template in {config_file}: expected a string")
        config.template = template

    suffixes = data.get("exclude_suffixes")
    if suffixes is not None:
        if isinstance(suffixes, str):
            suffixes = [suffixes]
        if not isinstance(suffixes, list) or not all(isinstance(s, str) for s in suffixes):
            raise ConfigError(
                f"Invalid exclude_suffixes in {config_file}: expected a list of strings"
            )
        config.exclude_suffixes = list(suffixes)

    logger.debug(f"Loaded config from {config_file}")
    return config


def save_config(config: OrderConfig, config_file: Path | None = None) -> Path:
    """Write ``config`` as YAML, creating the config directory if needed."""
    config_file = config_file or default_config_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, object] = {"exclude_suffixes": list(config.exclude_suffixes)}
    if config.template is not None:
        data["template"] = config.template

    yaml = YAML()
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(data, f)

    logger.info(f"Saved config to {config_file}")
    return config_file


__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "OrderConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
