"""Build-time defaults for the NAS option table and their file overrides."""

import configparser
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

import yaml

from .constants import (
    DEFAULT_NETWORK_HOSTNAME,
    DEFAULT_NETWORK_PORT_NUMBER,
    DEFAULT_TRACE_LEVEL,
    DEFAULT_UE_ID,
    DEFAULT_USER_PORT_NUMBER,
    DEFAULTS_FILE_ENV_VAR,
    DEFAULTS_SECTION,
)
from .errors import ConfigFileNotFoundError, ConfigParseError, UnknownOptionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildDefaults:
    """Default values of the options that are fixed when the process is built.

    Values are kept as strings: they fill option slots exactly as if they
    had been typed on the command line.
    """

    ue_id: str = DEFAULT_UE_ID
    trace_level: str = DEFAULT_TRACE_LEVEL
    network_host: str = DEFAULT_NETWORK_HOSTNAME
    user_port: str = DEFAULT_USER_PORT_NUMBER
    network_port: str = DEFAULT_NETWORK_PORT_NUMBER

    @classmethod
    def field_names(cls) -> list[str]:
        return [field.name for field in fields(cls)]

    def with_overrides(self, overrides: dict[str, Any]) -> "BuildDefaults":
        """
        Return a copy with some defaults replaced.

        :param overrides: Mapping of field name to new value; values are stringified
        :type overrides: dict[str, Any]
        :return: New defaults object
        :rtype: BuildDefaults
        :raises UnknownOptionError: If a key is not a build default
        """
        known = self.field_names()
        unknown = sorted(key for key in overrides if key not in known)
        if unknown:
            raise UnknownOptionError(
                f"Unknown build default(s) {unknown}. Available defaults: {known}"
            )
        return replace(self, **{key: str(value) for key, value in overrides.items()})


def _load_ini(path: str) -> dict[str, Any]:
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as e:
        raise ConfigParseError(f"Invalid INI format in '{path}': {e}") from e

    if not parser.has_section(DEFAULTS_SECTION):
        raise ConfigParseError(f"Missing [{DEFAULTS_SECTION}] section in '{path}'")
    return dict(parser[DEFAULTS_SECTION])


def _load_json(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Invalid JSON format in '{path}': {e}") from e


def _load_yaml(path: str) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML format in '{path}': {e}") from e


def _extract_mapping(data: Any, path: str) -> dict[str, Any]:
    if isinstance(data, dict) and DEFAULTS_SECTION in data:
        data = data[DEFAULTS_SECTION]
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Expected a mapping of build defaults in '{path}', "
            f"got {type(data).__name__}"
        )
    return data


def load_build_defaults(
    path: str | None = None, base: BuildDefaults | None = None
) -> BuildDefaults:
    """
    Load build defaults, applying overrides from a defaults file.

    The file may be INI (``[build_defaults]`` section), JSON or YAML (a
    mapping, optionally nested under ``build_defaults``). Keys not present in
    the file keep the value from ``base``.

    :param path: Defaults file path; None returns ``base`` unchanged
    :type path: str | None
    :param base: Defaults to start from, the compiled-in values if None
    :type base: BuildDefaults | None
    :return: Resulting build defaults
    :rtype: BuildDefaults
    :raises ConfigFileNotFoundError: If the file does not exist
    :raises ConfigParseError: If the file cannot be parsed
    :raises UnknownOptionError: If the file names an unknown default
    """
    defaults = base or BuildDefaults()
    if path is None:
        return defaults

    path = os.path.expanduser(path)
    if not os.path.exists(path):
        raise ConfigFileNotFoundError(f"Could not find defaults file at: {path}")

    if path.endswith(".ini"):
        overrides = _load_ini(path)
    elif path.endswith(".json"):
        overrides = _extract_mapping(_load_json(path), path)
    elif path.endswith((".yaml", ".yml")):
        overrides = _extract_mapping(_load_yaml(path), path)
    else:
        raise ConfigParseError(f"Unsupported defaults file format: {path}")

    logger.debug("Loaded build defaults %s from %s", sorted(overrides), path)
    return defaults.with_overrides(overrides)


def defaults_path_from_env(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the defaults file named by ``NAS_DEFAULTS_FILE``, if set."""
    environ = os.environ if environ is None else environ
    return environ.get(DEFAULTS_FILE_ENV_VAR) or None
