"""
Toolchain commands.

This module implements CLI commands for inspecting installed toolchains:
- list: Show every toolchain in the search path
- info: Look up one toolchain by name
- paths: Show the effective search path
"""

import json
import logging

from srclibkit.core.exceptions import (
    ConfigurationError,
    ToolchainError,
    ToolchainNotFoundError,
)
from srclibkit.cli.utils import print_error, resolve_config, safe_print
from srclibkit.toolchain.info import ToolchainInfo
from srclibkit.toolchain.registry import ToolchainRegistry

logger = logging.getLogger(__name__)

EXIT_NOT_FOUND = 2


def _print_info(info: ToolchainInfo, indent: str = "  "):
    safe_print(f"{indent}Directory:  {info.directory}")
    safe_print(f"{indent}Manifest:   {info.manifest_filename}")
    safe_print(f"{indent}Program:    {info.program or '(none)'}")
    safe_print(f"{indent}Dockerfile: {info.dockerfile or '(none)'}")


def run_list(args) -> int:
    """
    List all toolchains in the search path.

    Args:
        args: Parsed command-line arguments with:
            - json: Print JSON instead of text

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config = resolve_config(args)
        toolchains = ToolchainRegistry.from_config(config).list()
    except (ConfigurationError, ToolchainError) as e:
        logger.error(f"Failed to list toolchains: {e}")
        print_error("Failed to list toolchains", str(e))
        return 1

    if getattr(args, "json", False):
        safe_print(json.dumps([t.to_dict() for t in toolchains], indent=2))
        return 0

    if not toolchains:
        safe_print("No toolchains found in search path:")
        for entry in config.search_path:
            safe_print(f"  - {entry}")
        return 0

    safe_print(f"\n{len(toolchains)} toolchain(s) found:\n")
    for i, info in enumerate(toolchains, 1):
        flags = []
        if info.has_program:
            flags.append("program")
        if info.has_dockerfile:
            flags.append("docker")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        safe_print(f"  {i}. {info.name}{suffix}")
        _print_info(info, indent="     ")
    return 0


def run_info(args) -> int:
    """
    Show one toolchain.

    Args:
        args: Parsed command-line arguments with:
            - name: Toolchain name
            - json: Print JSON instead of text

    Returns:
        Exit code (0 for success, 2 if not found, 1 for other errors)
    """
    try:
        config = resolve_config(args)
        info = ToolchainRegistry.from_config(config).lookup(args.name)
    except ToolchainNotFoundError as e:
        logger.debug(f"Lookup failed: {e}")
        print_error(f"Toolchain not found: {e.name}", f"Search path: {config.search_path}")
        return EXIT_NOT_FOUND
    except (ConfigurationError, ToolchainError) as e:
        logger.error(f"Failed to look up toolchain {args.name}: {e}")
        print_error(f"Failed to look up toolchain {args.name}", str(e))
        return 1

    if getattr(args, "json", False):
        safe_print(json.dumps(info.to_dict(), indent=2))
        return 0

    safe_print(info.name)
    _print_info(info)
    return 0


def run_paths(args) -> int:
    """
    Show the toolchain search path.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config = resolve_config(args)
    except ConfigurationError as e:
        print_error("Cannot determine toolchain search path", str(e))
        return 1

    safe_print(f"Toolchain search path (from {config.source}):")
    for entry in config.search_path:
        safe_print(f"  - {entry}")
    return 0
