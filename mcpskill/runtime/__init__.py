"""
Runtime package for mcp-skill-cli

Contains:
- launcher.py: Runs an installed binary with the caller's arguments
- binaries/: Binary resolution and installation
"""

from mcpskill.runtime.binaries.resolver import resolve_binary
from mcpskill.runtime.binaries.installer import install, ensure_binary
from mcpskill.runtime.launcher import run_binary

__all__ = [
    "resolve_binary",
    "install",
    "ensure_binary",
    "run_binary",
]
