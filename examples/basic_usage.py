"""
Basic usage examples for mcp-skill-cli
"""

from pathlib import Path

from mcpskill import InstallerConfig, BinaryNotFoundError
from mcpskill.runtime import ensure_binary, install, resolve_binary, run_binary


# Example 1: Install everything for this host
def install_all():
    """Same as the `mcp-skill install` command"""
    installed = install(InstallerConfig.from_env())
    for path in installed:
        print(f"Downloaded {path}")


# Example 2: Install into a custom directory from a fork
def install_from_fork():
    config = InstallerConfig.from_env(
        repo="someone/mcp-skill-cli",
        bin_dir=Path.home() / ".local" / "share" / "mcp-skill",
    )
    install(config)


# Example 3: Locate a binary without downloading
def locate():
    try:
        print(resolve_binary("mcp"))
    except BinaryNotFoundError as e:
        print(f"Not installed: {e}")


# Example 4: Download on first use, then run
def run_skill_list():
    config = InstallerConfig.from_env()
    ensure_binary("skill", config)
    return run_binary("skill", ["list"], config)


if __name__ == "__main__":
    install_all()
    locate()
