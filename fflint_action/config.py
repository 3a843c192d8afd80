"""
Action configuration.

Values are layered, later sources winning:

    defaults < YAML config file < INPUT_* environment < explicit overrides

An empty value at any layer means "not set" and falls through to the
layer below, matching how CI runners pass unset action inputs.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from fflint_action.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "fflint-action.yaml"


@dataclass(frozen=True)
class ActionConfig:
    """
    Inputs of a single fflint run.

    Attributes:
        version: 'latest' or a release tag
        command: fflint subcommand
        args: extra arguments, inserted verbatim before the file glob
        files: file glob passed as the final argument
    """

    version: str = "latest"
    command: str = "ext"
    args: str = ""
    files: str = "**/*"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ActionConfig":
        """Build a config from a mapping, ignoring unknown and empty keys."""
        return cls().merged(values)

    def merged(self, values: Mapping[str, Any]) -> "ActionConfig":
        """Return a copy with non-empty values from ``values`` applied."""
        updates = {}
        for field in fields(self):
            value = values.get(field.name)
            if value is None:
                continue
            value = str(value).strip()
            if value:
                updates[field.name] = value
        return replace(self, **updates)


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Read an action input from the environment.

    Args:
        name: Input name (e.g. 'version')
        environ: Environment mapping (os.environ if None)

    Returns:
        Stripped input value, or '' if unset
    """
    environ = os.environ if environ is None else environ
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return environ.get(key, "").strip()


def inputs_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect all known action inputs from the environment."""
    return {field.name: get_input(field.name, environ) for field in fields(ActionConfig)}


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required and missing, cannot be
            parsed, or does not hold a mapping
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Expected a mapping in {config_file}, got {type(config).__name__}"
        )
    return config


def load_config(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ActionConfig:
    """
    Resolve the effective action configuration.

    Args:
        config_file: Explicit YAML file (required to exist when given).
            When None, ./fflint-action.yaml is read if present.
        environ: Environment mapping for INPUT_* values (os.environ if None)
        overrides: Highest-priority values, e.g. from CLI flags

    Returns:
        ActionConfig with defaults applied
    """
    if config_file is not None:
        file_values = load_yaml_config(Path(config_file), required=True)
    else:
        file_values = load_yaml_config(Path.cwd() / DEFAULT_CONFIG_FILE)

    config = ActionConfig.from_mapping(file_values)
    config = config.merged(inputs_from_env(environ))
    if overrides:
        config = config.merged(overrides)

    logger.debug(f"Resolved configuration: {config}")
    return config
