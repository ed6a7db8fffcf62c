"""
Console entry points that run the installed native binaries
"""

import subprocess
import sys
from typing import List, Optional

from mcpskill.core.config import InstallerConfig
from mcpskill.core.exceptions import McpSkillError
from mcpskill.runtime.binaries.resolver import resolve_binary
from mcpskill.utils.logging import get_logger

logger = get_logger(__name__)


def run_binary(name: str, argv: List[str], config: Optional[InstallerConfig] = None) -> int:
    """
    Run an installed binary with inherited stdio.

    Args:
        name: Logical binary name
        argv: Arguments passed through unchanged
        config: Installer configuration (default: from environment)

    Returns:
        The binary's exit code

    Raises:
        BinaryNotFoundError: If the binary is not installed
    """
    config = config or InstallerConfig.from_env()
    path = resolve_binary(name, config.bin_dir, config.platform, config.arch)
    logger.debug(f"Launching {path} {argv}")

    try:
        completed = subprocess.run([str(path), *argv])
    except KeyboardInterrupt:
        return 130
    return completed.returncode


def _launch(name: str) -> int:
    try:
        return run_binary(name, sys.argv[1:])
    except (McpSkillError, OSError) as e:
        print(str(e), file=sys.stderr)
        return 1


def main_mcp() -> int:
    """Entry point for the `mcp` console script"""
    return _launch("mcp")


def main_skill() -> int:
    """Entry point for the `skill` console script"""
    return _launch("skill")
