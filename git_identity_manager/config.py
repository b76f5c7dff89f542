"""Configuration file management.

Identities live in a TOML file under the platform's user configuration
directory::

    [identities.The_Linux_Developer]
    name = "The Linux Developer"
    email = "email@thelinux.dev"

The file is written by hand rather than with a generic TOML writer so that
every identity gets its own section with ``name`` and ``email`` in that
order.
"""

import logging
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click

from .exceptions import ConfigLoadError, ConfigSaveError, IdentityTableMissingError
from .ui_common import print_warning

logger = logging.getLogger(__name__)

APP_NAME = "git_identity_manager"
CONFIG_FILE_NAME = "git_identities.toml"
CONFIG_ENV_VAR = "GIT_IDENTITY_MANAGER_CONFIG"

IDENTITY_FIELDS = ("name", "email")

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


@dataclass
class Configuration:
    """Root table of the identities configuration file."""
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def identities(self) -> dict[str, Any]:
        """Get the ``identities`` table.

        Raises:
            IdentityTableMissingError: If the table is absent or not a table
        """
        identities = self.data.get("identities")
        if not isinstance(identities, dict):
            raise IdentityTableMissingError(
                "Identities configuration missing",
                details="The configuration file has no [identities] table",
            )
        return identities


def create_empty_config() -> Configuration:
    """Create a configuration with an empty identities table."""
    return Configuration(data={"identities": {}})


def get_config_file_path() -> Path:
    """Get the path to the identities file, creating its directory.

    ``GIT_IDENTITY_MANAGER_CONFIG`` overrides the location. Otherwise the
    file lives in the platform's user configuration directory:

    - Linux/Unix: $XDG_CONFIG_HOME/git_identity_manager/git_identities.toml
      (or $HOME/.config/...)
    - macOS: $HOME/Library/Application Support/git_identity_manager/git_identities.toml
    - Windows: %APPDATA%\\git_identity_manager\\git_identities.toml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        config_file = Path(override).expanduser()
    else:
        config_file = Path(click.get_app_dir(APP_NAME, roaming=True)) / CONFIG_FILE_NAME

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create config directory {config_file.parent}: {e}")
        print_warning(f"Failed to create config directory: {e}")

    logger.debug(f"Using config file: {config_file}")
    return config_file


def read_config(path: Path) -> Configuration:
    """Read and parse the configuration file.

    Raises:
        ConfigLoadError: If the file is missing, unreadable or not valid TOML
    """
    try:
        contents = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigLoadError(f"Config file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Failed to read config file {path}: {e}") from e

    try:
        return Configuration(data=tomllib.loads(contents))
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(f"Failed to parse config file {path}: {e}") from e


def load_config(path: Path) -> Configuration:
    """Load the configuration, falling back to an empty one on any failure."""
    if not path.exists():
        logger.debug(f"No config file at {path}, starting empty")
        return create_empty_config()

    try:
        config = read_config(path)
    except ConfigLoadError as e:
        logger.warning(f"{e}; starting with an empty configuration")
        return create_empty_config()

    if not config.data:
        logger.debug(f"Config file {path} is empty, starting empty")
        return create_empty_config()

    logger.info(f"Loaded configuration from {path}")
    return config


def _escape(value: str) -> str:
    """Escape a string for use inside a TOML basic string."""
    escaped = []
    for char in value:
        if char in _ESCAPES:
            escaped.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\u{ord(char):04X}")
        else:
            escaped.append(char)
    return "".join(escaped)


def _format_key(key: str) -> str:
    """Format a table key, quoting it unless it is a bare TOML key."""
    if _BARE_KEY.fullmatch(key):
        return key
    return f'"{_escape(key)}"'


def format_config(config: Configuration) -> str:
    """Format the configuration as TOML, one section per identity.

    Identities are written in the table's own order; ``name`` and ``email``
    come first in each section, followed by any other string fields.
    """
    output = []
    for key, record in config.identities.items():
        if not isinstance(record, dict):
            logger.warning(f"Skipping identity '{key}': not a table")
            continue

        output.append(f"[identities.{_format_key(key)}]\n")
        fields = [f for f in IDENTITY_FIELDS if f in record]
        fields += [f for f in record if f not in IDENTITY_FIELDS]
        for field_name in fields:
            value = record[field_name]
            if not isinstance(value, str):
                logger.debug(f"Dropping non-string field '{field_name}' of '{key}'")
                continue
            output.append(f'{_format_key(field_name)} = "{_escape(value)}"\n')
        output.append("\n")

    return "".join(output)


def save_config(path: Path, config: Configuration) -> None:
    """Write the configuration to disk, replacing the file.

    Raises:
        ConfigSaveError: If the file cannot be written
    """
    contents = format_config(config)
    try:
        path.write_text(contents, encoding="utf-8", newline="\n")
    except OSError as e:
        raise ConfigSaveError(f"Error saving config: {e}", details=str(path)) from e

    logger.info(f"Saved {len(config.identities)} identities to {path}")
