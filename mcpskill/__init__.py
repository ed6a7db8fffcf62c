"""
mcp-skill-cli: installer and launcher for the prebuilt mcp and skill binaries
"""

__version__ = "0.4.2"

from mcpskill.core.config import InstallerConfig
from mcpskill.core.exceptions import (
    McpSkillError,
    UnsupportedPlatformError,
    UnsupportedArchitectureError,
    DownloadError,
    AssetNotFoundError,
    BinaryNotFoundError,
    VersionNotFoundError,
)

__all__ = [
    "__version__",
    "InstallerConfig",
    "McpSkillError",
    "UnsupportedPlatformError",
    "UnsupportedArchitectureError",
    "DownloadError",
    "AssetNotFoundError",
    "BinaryNotFoundError",
    "VersionNotFoundError",
]
