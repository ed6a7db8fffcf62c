"""
Custom exceptions for mcp-skill-cli

Every fatal condition the installer, resolver or release-notes tool can hit
maps to one class here. Network (requests) and filesystem (OSError) failures
are not wrapped and propagate as-is.
"""

from typing import Optional


class McpSkillError(Exception):
    """Base exception for all mcp-skill-cli errors"""
    pass


class UnsupportedPlatformError(McpSkillError):
    """Raised when the host operating system has no published binaries"""
    pass


class UnsupportedArchitectureError(McpSkillError):
    """Raised when the host CPU architecture has no published binaries"""
    pass


class DownloadError(McpSkillError):
    """
    Raised when a release asset cannot be fetched.

    Attributes:
        status_code: Terminal HTTP status, if a response was received
        url: The URL of the failing request
    """
    def __init__(self, message: str, status_code: Optional[int] = None, url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class AssetNotFoundError(DownloadError):
    """Raised when the release has no asset under the requested name (HTTP 404)"""
    pass


class BinaryNotFoundError(McpSkillError):
    """Raised when an installed binary is missing; reinstalling fixes it"""
    pass


class VersionNotFoundError(McpSkillError):
    """Raised when the changelog has no section for the requested version"""
    pass
