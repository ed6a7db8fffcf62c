"""
Release asset installer

Downloads the prebuilt binaries matching the host platform from the GitHub
release for the configured version.

Key behaviour:
- Binaries already present on disk are never re-downloaded
- Windows assets are tried under two names (".exe" and ".exe.exe") because
  both spellings have been published
- Redirects are followed explicitly, up to config.max_redirects hops
- No retries: the first unrecoverable error aborts the whole install
"""

import os
from pathlib import Path
from typing import List, Optional
from urllib.parse import urljoin

import requests
from tqdm import tqdm

from mcpskill.core.config import InstallerConfig
from mcpskill.core.exceptions import DownloadError, AssetNotFoundError
from mcpskill.runtime.binaries.resolver import binary_path, resolve_binary
from mcpskill.utils.logging import get_logger
from mcpskill.utils.platform import is_windows

logger = get_logger(__name__)

CHUNK_SIZE = 64 * 1024
EXECUTABLE_MODE = 0o755
REDIRECT_STATUSES = range(300, 400)


def asset_candidates(name: str, config: InstallerConfig) -> List[str]:
    """
    Asset filenames to try for a binary, in order.

    Args:
        name: Logical binary name
        config: Installer configuration (version, platform, arch)

    Returns:
        One name on macOS/Linux, two on Windows
    """
    base = f"{name}_{config.version}_{config.platform}_{config.arch}"
    if is_windows(config.platform):
        return [f"{base}.exe", f"{base}.exe.exe"]
    return [base]


def asset_url(asset_name: str, config: InstallerConfig) -> str:
    """Download URL of a release asset"""
    return (
        f"https://{config.download_host}/{config.repo}"
        f"/releases/download/v{config.version}/{asset_name}"
    )


def _content_length(response: requests.Response) -> int:
    """Declared body size, or 0 when missing or unparseable"""
    try:
        return max(int(response.headers.get("Content-Length") or 0), 0)
    except ValueError:
        return 0


class BinaryInstaller:
    """
    Installs the configured binaries into config.bin_dir.

    Usage:
        installer = BinaryInstaller(InstallerConfig.from_env())
        installer.install()
    """

    def __init__(
        self,
        config: Optional[InstallerConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            config: Installer configuration (default: from environment)
            session: HTTP session to issue requests with
        """
        self.config = config or InstallerConfig.from_env()
        self.session = session or requests.Session()

    def install(self, force: bool = False, names: Optional[List[str]] = None) -> List[Path]:
        """
        Download every missing binary.

        Args:
            force: Re-download binaries that are already present
            names: Subset of config.binaries to install

        Returns:
            Paths of the binaries downloaded by this call
        """
        if self.config.skip_download:
            logger.info("Download disabled by MCP_SKIP_DOWNLOAD")
            return []

        self.config.ensure_dirs()
        installed = []
        for name in names or self.config.binaries:
            dest = binary_path(name, self.config.bin_dir, self.config.platform)
            if dest.exists() and not force:
                logger.debug(f"{name} already installed at {dest}, skipping")
                continue

            self.download_binary(name, dest)
            if not is_windows(self.config.platform):
                os.chmod(dest, EXECUTABLE_MODE)
            logger.info(f"✓ Installed {name} → {dest}")
            installed.append(dest)

        return installed

    def download_binary(self, name: str, dest: Path) -> None:
        """
        Fetch the first available asset candidate for a binary.

        Raises:
            DownloadError: The last candidate's failure, when none succeed
            requests.RequestException: Connection-level failure of the last candidate
            OSError: Failure writing the destination on the last candidate
        """
        last_error: Optional[Exception] = None
        for asset_name in asset_candidates(name, self.config):
            url = asset_url(asset_name, self.config)
            try:
                self.download(url, dest)
                return
            except (DownloadError, requests.RequestException, OSError) as e:
                logger.debug(f"Candidate {asset_name} failed: {e}")
                last_error = e

        if last_error is not None:
            raise last_error
        raise DownloadError(f"download failed for {name}")

    def download(self, url: str, dest: Path) -> None:
        """
        GET a URL and stream the body to dest.

        Redirects are followed by hand so the hop limit is ours to enforce.

        Raises:
            AssetNotFoundError: Terminal 404
            DownloadError: Any other non-200 status, or too many redirects
        """
        current = url
        for _ in range(self.config.max_redirects + 1):
            response = self.session.get(
                current,
                headers={"User-Agent": self.config.user_agent},
                allow_redirects=False,
                stream=True,
                timeout=self.config.timeout,
            )
            try:
                location = response.headers.get("Location")
                if response.status_code in REDIRECT_STATUSES and location:
                    logger.debug(f"Redirect {response.status_code}: {current} → {location}")
                    current = urljoin(current, location)
                    continue

                if response.status_code != 200:
                    error_cls = AssetNotFoundError if response.status_code == 404 else DownloadError
                    raise error_cls(
                        f"download failed ({response.status_code}): {current}",
                        status_code=response.status_code,
                        url=current,
                    )

                self._write_body(response, dest)
                return
            finally:
                response.close()

        raise DownloadError(
            f"download failed (too many redirects, limit {self.config.max_redirects}): {url}",
            url=url,
        )

    def _write_body(self, response: requests.Response, dest: Path) -> None:
        """Stream a response body into dest, created with executable permission bits"""
        total = _content_length(response)
        fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0), EXECUTABLE_MODE)

        progress = None
        if self.config.show_progress and total:
            progress = tqdm(
                total=total,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=f"Downloading {Path(dest).name}",
            )
        try:
            with os.fdopen(fd, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if not chunk:
                        continue
                    f.write(chunk)
                    if progress is not None:
                        progress.update(len(chunk))
        finally:
            if progress is not None:
                progress.close()


def install(
    config: Optional[InstallerConfig] = None,
    force: bool = False,
    session: Optional[requests.Session] = None,
) -> List[Path]:
    """Install all configured binaries; see BinaryInstaller.install"""
    return BinaryInstaller(config, session=session).install(force=force)


def ensure_binary(
    name: str,
    config: Optional[InstallerConfig] = None,
    session: Optional[requests.Session] = None,
) -> Path:
    """
    Return the path of an installed binary, downloading it first if missing.

    Raises:
        BinaryNotFoundError: If downloads are disabled and the binary is absent
    """
    config = config or InstallerConfig.from_env()
    dest = binary_path(name, config.bin_dir, config.platform)
    if not dest.exists():
        BinaryInstaller(config, session=session).install(names=[name])
    return resolve_binary(name, config.bin_dir, config.platform, config.arch)
