"""
Search path configuration.

The toolchain search path is resolved once, from the first of these that is
set:

1. An explicit value (e.g. ``srclib --srclibpath``)
2. The ``SRCLIBPATH`` environment variable
3. The ``srclibpath`` key of a YAML configuration file
4. ``~/.srclib``

Resolution never terminates the process; failures raise
:class:`~srclibkit.core.exceptions.ConfigurationError` and the caller decides
whether they are fatal.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from srclibkit.core.directory import default_srclib_dir
from srclibkit.core.exceptions import ConfigurationError
from srclibkit.toolchain.search_path import SearchPath

logger = logging.getLogger(__name__)

SRCLIBPATH_ENV = "SRCLIBPATH"
CONFIG_KEY = "srclibpath"


@dataclass(frozen=True)
class SrclibConfig:
    """Resolved configuration. ``source`` records where the search path came from."""

    search_path: SearchPath
    source: str = "default"


def load_yaml_config(config_file: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file

    Returns:
        Configuration dictionary (empty dict if the file doesn't exist)

    Raises:
        ConfigurationError: If the file can't be read or isn't a YAML mapping
    """
    if not config_file.exists():
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid configuration in {config_file}: expected a mapping"
        )
    return config


def load_config(
    search_path: Optional[str] = None,
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SrclibConfig:
    """
    Resolve the toolchain search path.

    Args:
        search_path: Explicit colon-separated search path (highest priority)
        config_file: Optional YAML file with a ``srclibpath`` key
        environ: Environment mapping (default: ``os.environ``)

    Returns:
        SrclibConfig with the parsed search path

    Raises:
        ConfigurationError: If the config file is invalid or no home
            directory is available for the default location

    Example:
        >>> config = load_config(environ={"SRCLIBPATH": "/opt/a:/opt/b"})
        >>> list(config.search_path)
        ['/opt/a', '/opt/b']
    """
    if environ is None:
        environ = os.environ

    if search_path:
        logger.debug(f"Using explicit search path: {search_path}")
        return SrclibConfig(SearchPath.parse(search_path), "explicit")

    env_value = environ.get(SRCLIBPATH_ENV, "")
    if env_value:
        logger.debug(f"Using {SRCLIBPATH_ENV}={env_value}")
        return SrclibConfig(SearchPath.parse(env_value), "env")

    if config_file is not None:
        value = load_yaml_config(Path(config_file)).get(CONFIG_KEY)
        if value:
            if isinstance(value, (list, tuple)):
                value = ":".join(str(v) for v in value)
            logger.debug(f"Using {CONFIG_KEY} from {config_file}: {value}")
            return SrclibConfig(SearchPath.parse(str(value)), "config-file")

    default_dir = default_srclib_dir()
    logger.debug(f"Using default search path: {default_dir}")
    return SrclibConfig(SearchPath([str(default_dir)]), "default")
