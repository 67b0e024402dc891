"""
srclib CLI argument parser.

This module implements the command-line interface for srclibkit using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("srclibkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """srclib command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="srclib",
            description="srclib - find and inspect installed analysis toolchains",
            epilog='Use "srclib COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"srclib {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to YAML configuration file with a 'srclibpath' key",
        )
        parser.add_argument(
            "--srclibpath",
            metavar="DIRS",
            help="Colon-separated toolchain search path (overrides SRCLIBPATH)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_toolchain_command(subparsers)
        self._add_repo_command(subparsers)

        return parser

    def _add_toolchain_command(self, subparsers):
        """Add 'toolchain' subcommand with sub-subcommands."""
        parser = subparsers.add_parser(
            "toolchain",
            help="Find installed toolchains",
            description="List and inspect toolchains in the search path",
        )

        toolchain_subparsers = parser.add_subparsers(
            dest="toolchain_command",
            help="Toolchain commands",
            metavar="COMMAND",
        )

        list_parser = toolchain_subparsers.add_parser(
            "list",
            help="List installed toolchains",
            description="Show every toolchain found in the search path",
        )
        list_parser.add_argument(
            "--json", action="store_true", help="Print toolchains as JSON"
        )

        info_parser = toolchain_subparsers.add_parser(
            "info",
            help="Show one toolchain",
            description="Look up a toolchain by name (e.g. github.com/org/toolchain)",
        )
        info_parser.add_argument("name", type=str, help="Toolchain name")
        info_parser.add_argument(
            "--json", action="store_true", help="Print toolchain as JSON"
        )

        toolchain_subparsers.add_parser(
            "paths",
            help="Show the toolchain search path",
            description="Show the effective search path and where it came from",
        )

    def _add_repo_command(self, subparsers):
        """Add 'repo' subcommand with sub-subcommands."""
        parser = subparsers.add_parser(
            "repo",
            help="Inspect the repository being analyzed",
            description="Show repository context and configuration",
        )

        repo_subparsers = parser.add_subparsers(
            dest="repo_command", help="Repository commands", metavar="COMMAND"
        )

        info_parser = repo_subparsers.add_parser(
            "info",
            help="Show repository context",
            description="Detect VCS, root directory, commit and clone URL",
        )
        info_parser.add_argument(
            "dir", nargs="?", default=".", help="Directory in the repository"
        )

        config_parser = repo_subparsers.add_parser(
            "config",
            help="Show repository configuration",
            description="Read (or compute) and optionally cache repository configuration",
        )
        config_parser.add_argument(
            "dir", nargs="?", default=".", help="Directory in the repository"
        )
        config_parser.add_argument(
            "--write",
            action="store_true",
            help="Cache the configuration in the build store",
        )
        config_parser.add_argument(
            "--overwrite",
            action="store_true",
            help="Replace an existing cached configuration",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to the sub-command handler of a command group.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        if args.command == "toolchain":
            from srclibkit.cli.commands import toolchain

            sub_command = getattr(args, "toolchain_command", None)
            command_map = {
                "list": toolchain.run_list,
                "info": toolchain.run_info,
                "paths": toolchain.run_paths,
            }
        elif args.command == "repo":
            from srclibkit.cli.commands import repo

            sub_command = getattr(args, "repo_command", None)
            command_map = {
                "info": repo.run_info,
                "config": repo.run_config,
            }
        else:
            logger.error(f"Unknown command: {args.command}")
            return 1

        if not sub_command:
            logger.error(f"No {args.command} sub-command specified")
            self.parser.parse_args([args.command, "--help"])
            return 1

        handler = command_map.get(sub_command)
        if not handler:
            logger.error(f"Unknown {args.command} command: {sub_command}")
            return 1

        return handler(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
