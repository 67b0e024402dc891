"""
Shared utilities for CLI commands.

Provides common functionality used across CLI commands to ensure consistent
output and configuration handling.
"""

import logging
import sys
from typing import Optional

from srclibkit.core.config import SrclibConfig, load_config

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================


def resolve_config(args) -> SrclibConfig:
    """
    Build the search path configuration from global CLI options.

    Args:
        args: Parsed arguments with optional ``srclibpath`` and ``config``

    Returns:
        Resolved SrclibConfig

    Raises:
        ConfigurationError: If no usable search path can be determined
    """
    search_path = getattr(args, "srclibpath", None)
    config_file = getattr(args, "config", None)
    config = load_config(search_path=search_path, config_file=config_file)
    logger.debug(f"Search path ({config.source}): {config.search_path}")
    return config


# ============================================================================
# Output Formatting
# ============================================================================


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for limited consoles.

    Toolchain names and paths may contain characters the console encoding
    can't represent; those are escaped instead of raising.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message.encode("ascii", "backslashreplace").decode("ascii")
        print(safe_message, file=file)
