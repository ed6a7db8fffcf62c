"""
Host platform and architecture naming

Maps whatever the interpreter reports onto the small vocabulary used in
release asset filenames. The installer and the launcher both go through
these functions so download-time and run-time names never drift apart.
"""

import platform
from typing import Optional

from mcpskill.core.exceptions import UnsupportedPlatformError, UnsupportedArchitectureError

WINDOWS = "windows"
DARWIN = "darwin"
LINUX = "linux"

AMD64 = "amd64"
ARM64 = "arm64"

SUPPORTED_PLATFORMS = (WINDOWS, DARWIN, LINUX)
SUPPORTED_ARCHITECTURES = (AMD64, ARM64)

_PLATFORM_ALIASES = {
    "windows": WINDOWS,
    "darwin": DARWIN,
    "linux": LINUX,
}

_ARCH_ALIASES = {
    "x86_64": AMD64,
    "amd64": AMD64,
    "x64": AMD64,
    "arm64": ARM64,
    "aarch64": ARM64,
}


def platform_name(system: Optional[str] = None) -> str:
    """
    Canonical platform name for the host (or for an explicit system string).

    Args:
        system: Value as reported by platform.system(); defaults to the host

    Returns:
        One of "windows", "darwin", "linux"

    Raises:
        UnsupportedPlatformError: For any other operating system
    """
    if system is None:
        system = platform.system()
    name = _PLATFORM_ALIASES.get(system.lower())
    if name is None:
        raise UnsupportedPlatformError(f"unsupported platform: {system}")
    return name


def arch_name(machine: Optional[str] = None) -> str:
    """
    Canonical architecture name for the host (or for an explicit machine string).

    Args:
        machine: Value as reported by platform.machine(); defaults to the host

    Returns:
        One of "amd64", "arm64"

    Raises:
        UnsupportedArchitectureError: For any other CPU
    """
    if machine is None:
        machine = platform.machine()
    name = _ARCH_ALIASES.get(machine.lower())
    if name is None:
        raise UnsupportedArchitectureError(f"unsupported architecture: {machine}")
    return name


def binary_extension(platform_id: str) -> str:
    """Executable suffix for a canonical platform name"""
    return ".exe" if platform_id == WINDOWS else ""


def is_windows(platform_id: str) -> bool:
    return platform_id == WINDOWS
