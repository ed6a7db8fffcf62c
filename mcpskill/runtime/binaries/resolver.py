"""
Installed binary lookup
"""

from pathlib import Path
from typing import Optional

from mcpskill.core.config import default_bin_dir
from mcpskill.core.exceptions import BinaryNotFoundError
from mcpskill.utils.platform import platform_name, arch_name, binary_extension


def binary_path(name: str, bin_dir: Path, platform_id: str) -> Path:
    """Expected install location of a binary; does not touch the filesystem"""
    return Path(bin_dir) / f"{name}{binary_extension(platform_id)}"


def resolve_binary(
    name: str,
    bin_dir: Optional[Path] = None,
    platform_id: Optional[str] = None,
    arch: Optional[str] = None,
) -> Path:
    """
    Locate an installed binary.

    The result is never cached; the file is checked on every call.

    Args:
        name: Logical binary name (e.g. "mcp")
        bin_dir: Install directory (default: the package's bin/native)
        platform_id: Canonical platform name (default: host)
        arch: Canonical architecture name (default: host)

    Returns:
        Absolute path to the binary

    Raises:
        BinaryNotFoundError: If the binary has not been installed
    """
    if bin_dir is None:
        bin_dir = default_bin_dir()
    platform_id = platform_id or platform_name()
    arch = arch or arch_name()

    path = binary_path(name, bin_dir, platform_id).resolve()
    if not path.exists():
        raise BinaryNotFoundError(
            f"binary not found ({platform_id}/{arch}): {name}; re-run mcp-skill install"
        )
    return path
