"""
Installer configuration

Everything the installer and launcher need is computed once into an
immutable InstallerConfig and passed down explicitly.
"""

import os
from importlib import metadata
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mcpskill.utils.platform import platform_name, arch_name

DISTRIBUTION_NAME = "mcp-skill-cli"
DEFAULT_RELEASE_REPO = "wangxu-dev/mcp-skill-cli"

ENV_SKIP_DOWNLOAD = "MCP_SKIP_DOWNLOAD"
ENV_RELEASE_REPO = "MCP_SKILL_RELEASE_REPO"

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def _default_version() -> str:
    """Version of the installed distribution, falling back to the package constant"""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        from mcpskill import __version__
        return __version__


def default_bin_dir() -> Path:
    return PACKAGE_ROOT / "bin" / "native"


class InstallerConfig(BaseModel):
    """
    Configuration for binary download and resolution.

    Use InstallerConfig.from_env() to honour the environment toggles.
    """

    model_config = ConfigDict(frozen=True)

    # Release source
    repo: str = Field(default=DEFAULT_RELEASE_REPO, description="GitHub owner/name hosting the releases")
    version: str = Field(default_factory=_default_version, description="Release version, without leading 'v'")
    download_host: str = Field(default="github.com", description="Host serving release downloads")

    # Host
    platform: str = Field(default_factory=lambda: platform_name(), description="Canonical platform name")
    arch: str = Field(default_factory=lambda: arch_name(), description="Canonical architecture name")

    # Layout
    bin_dir: Path = Field(default_factory=default_bin_dir, description="Where binaries are installed")
    binaries: Tuple[str, ...] = Field(default=("mcp", "skill"), description="Binaries to install")

    # HTTP
    user_agent: str = Field(default="mcp-skill-cli", description="User-Agent header for downloads")
    max_redirects: int = Field(default=5, ge=0, description="Redirect hops followed before giving up")
    connect_timeout_sec: float = Field(default=30.0, description="Connection timeout in seconds")
    read_timeout_sec: float = Field(default=300.0, description="Read timeout in seconds")

    # Behaviour
    skip_download: bool = Field(default=False, description="Disable all downloading")
    show_progress: bool = Field(default=True, description="Render a progress bar while downloading")

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides) -> "InstallerConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Explicit field values, applied last

        Returns:
            InstallerConfig
        """
        env = os.environ if environ is None else environ
        values = {
            "skip_download": env.get(ENV_SKIP_DOWNLOAD) == "1",
        }
        repo = env.get(ENV_RELEASE_REPO)
        if repo:
            values["repo"] = repo
        values.update(overrides)
        return cls(**values)

    @property
    def timeout(self) -> Tuple[float, float]:
        """(connect, read) tuple as accepted by requests"""
        return (self.connect_timeout_sec, self.read_timeout_sec)

    def ensure_dirs(self) -> None:
        """Create the binary directory if it doesn't exist"""
        self.bin_dir.mkdir(parents=True, exist_ok=True)
