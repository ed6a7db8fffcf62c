"""
Main CLI entry point for mcp-skill-cli.
"""
import argparse
import sys
from typing import List, Optional

import requests

from mcpskill import __version__
from mcpskill.core.exceptions import McpSkillError
from mcpskill.utils.logging import set_log_level, get_logger

logger = get_logger(__name__)

# Errors reported as a single line on stderr with exit status 1
FATAL_ERRORS = (McpSkillError, requests.RequestException, OSError)

GLOBAL_FLAGS = ("-v", "--verbose", "-q", "--quiet")


def _fail(error: BaseException) -> int:
    print(str(error) or error.__class__.__name__, file=sys.stderr)
    return 1


class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit 1 with a single stderr line"""

    def error(self, message: str):
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(1)


def cmd_install(args: argparse.Namespace) -> int:
    """Download the native binaries for this host"""
    from mcpskill.core.config import InstallerConfig
    from mcpskill.runtime.binaries.installer import BinaryInstaller

    try:
        overrides = {"show_progress": not args.quiet}
        if args.bin_dir:
            overrides["bin_dir"] = args.bin_dir
        config = InstallerConfig.from_env(**overrides)
        installer = BinaryInstaller(config)
        installer.install(force=args.force, names=args.names or None)
    except FATAL_ERRORS as e:
        return _fail(e)
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    """Print the path of an installed binary"""
    from mcpskill.core.config import InstallerConfig
    from mcpskill.runtime.binaries.resolver import resolve_binary

    try:
        config = InstallerConfig.from_env()
        path = resolve_binary(args.name, args.bin_dir or config.bin_dir, config.platform, config.arch)
    except FATAL_ERRORS as e:
        return _fail(e)
    print(path)
    return 0


def cmd_release_notes(args: argparse.Namespace) -> int:
    """Print the changelog section for a version"""
    from mcpskill.release.notes import read_release_notes

    if not args.version:
        print("usage: mcp-skill-release-notes <version>", file=sys.stderr)
        return 1
    try:
        notes = read_release_notes(args.version, args.changelog)
    except FATAL_ERRORS as e:
        return _fail(e)
    sys.stdout.write(notes)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show install configuration"""
    from mcpskill.core.config import InstallerConfig
    from mcpskill.runtime.binaries.resolver import binary_path

    try:
        config = InstallerConfig.from_env()
    except FATAL_ERRORS as e:
        return _fail(e)

    print(f"mcp-skill-cli v{__version__}")
    print("-" * 30)
    print(f"Release: {config.repo} v{config.version}")
    print(f"Target: {config.platform}/{config.arch}")
    print(f"Binary dir: {config.bin_dir}")
    for name in config.binaries:
        path = binary_path(name, config.bin_dir, config.platform)
        status = "installed" if path.exists() else "missing"
        print(f"  {name:<8} {status}")
    if config.skip_download:
        print("Downloads disabled (MCP_SKIP_DOWNLOAD=1)")
    print("-" * 30)
    return 0


def _add_release_notes_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("version", nargs="?", help="Version to extract (leading 'v' optional)")
    parser.add_argument(
        "--changelog",
        default="CHANGELOG.md",
        help="Changelog file (default: CHANGELOG.md in the current directory)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = CliArgumentParser(
        prog="mcp-skill",
        description="Install and locate the mcp and skill native binaries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    install_parser = subparsers.add_parser("install", help="Download binaries for this host")
    install_parser.add_argument("names", nargs="*", help="Binaries to install (default: all)")
    install_parser.add_argument("--force", action="store_true", help="Re-download existing binaries")
    install_parser.add_argument("--bin-dir", help="Install directory (default: package bin/native)")

    resolve_parser = subparsers.add_parser("resolve", help="Print the path of an installed binary")
    resolve_parser.add_argument("name", help="Binary name (e.g., mcp, skill)")
    resolve_parser.add_argument("--bin-dir", help="Install directory (default: package bin/native)")

    notes_parser = subparsers.add_parser("release-notes", help="Print changelog section for a version")
    _add_release_notes_arguments(notes_parser)

    subparsers.add_parser("info", help="Show platform, release and install status")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set log level
    if args.verbose:
        set_log_level("DEBUG")
    elif args.quiet:
        set_log_level("ERROR")

    # Route to command handlers
    if args.command == "install":
        return cmd_install(args)
    elif args.command == "resolve":
        return cmd_resolve(args)
    elif args.command == "release-notes":
        return cmd_release_notes(args)
    elif args.command == "info":
        return cmd_info(args)
    else:
        parser.print_help()
        return 1


def install_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for `mcp-skill-install` (post-install download hook)"""
    args = argv if argv is not None else sys.argv[1:]
    # Verbosity flags belong to the top-level parser, ahead of the subcommand
    global_flags = [a for a in args if a in GLOBAL_FLAGS]
    rest = [a for a in args if a not in GLOBAL_FLAGS]
    return main([*global_flags, "install", *rest])


def release_notes_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for `mcp-skill-release-notes <version>`"""
    parser = CliArgumentParser(
        prog="mcp-skill-release-notes",
        description="Print the CHANGELOG.md section for a version",
    )
    _add_release_notes_arguments(parser)
    args = parser.parse_args(argv)
    return cmd_release_notes(args)


if __name__ == "__main__":
    sys.exit(main())
