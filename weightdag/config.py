"""Configuration for graph behaviour, optionally read from an INI file"""

import configparser
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

APP_NAME = "weightdag"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/weightdag").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))

DAG_SECTION = "dag"


class ConfigError(Exception):
    """Raised when a configuration value cannot be interpreted."""

    def __init__(self, section: str, key: str, value: str):
        self.section = section
        self.key = key
        self.value = value
        super().__init__(
            f"Invalid value {value!r} for '{key}' in section [{section}]"
        )


class DAGOptions(BaseModel):
    """Behavioural switches of a DAG.

    memoize: cache longest path results per vertex during one search.
        Without it every shared sub-path is walked again, which is
        exponential on graphs with many converging branches.
    warn_on_rejected_edge: log a warning when an edge is rejected because
        it would close a cycle.
    """

    memoize: bool = True
    warn_on_rejected_edge: bool = True


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing files, sections and keys are not errors; lookups fall back to
    the supplied default.

    Usage:
        config = ConfigAccessor()
        value = config.get('dag', 'memoize', default='true')
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize a ConfigAccessor with an optional config file path.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def get_bool(self, section: str, key: str, default: bool) -> bool:
        """Get a boolean value, accepting the spellings configparser accepts."""
        raw = self.get(section, key)
        if raw is None:
            return default
        try:
            return self.config.BOOLEAN_STATES[raw.strip().lower()]
        except KeyError:
            raise ConfigError(section, key, raw) from None

    def sections(self) -> list:
        return self.config.sections()


def load_options(config_path: Optional[Path] = None) -> DAGOptions:
    """Build DAGOptions from the [dag] section of a config file."""
    accessor = ConfigAccessor(config_path)
    defaults = DAGOptions()
    return DAGOptions(
        memoize=accessor.get_bool(DAG_SECTION, "memoize", defaults.memoize),
        warn_on_rejected_edge=accessor.get_bool(
            DAG_SECTION, "warn_on_rejected_edge", defaults.warn_on_rejected_edge
        ),
    )
