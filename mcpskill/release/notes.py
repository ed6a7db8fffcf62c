"""
Changelog slicing for release notes

The changelog is a sequence of sections, each introduced by a level-2
heading that names the version ("## 1.2.0 - 2024-01-01" or "## 1.2.0").
"""

import re
from pathlib import Path
from typing import List, Union

from mcpskill.core.exceptions import VersionNotFoundError

HEADING_PREFIX = "## "
DEFAULT_CHANGELOG = "CHANGELOG.md"

_LINE_SPLIT = re.compile(r"\r?\n")


def normalize_version(version: str) -> str:
    """Strip a single leading 'v' ("v1.2.0" -> "1.2.0")"""
    return version[1:] if version.startswith("v") else version


def _heading_matches(line: str, version: str) -> bool:
    return f"## {version} " in line or line.strip() == f"## {version}"


def extract_release_notes(version: str, changelog: str, source: str = DEFAULT_CHANGELOG) -> str:
    """
    Return the changelog section for one version.

    Args:
        version: Version, with or without leading 'v'
        changelog: Full changelog text
        source: Changelog name used in the error message

    Returns:
        Body lines of the section up to the next level-2 heading,
        trimmed, with a single trailing newline

    Raises:
        VersionNotFoundError: If no heading names the version
    """
    version = normalize_version(version)
    in_section = False
    found = False
    output: List[str] = []

    for line in _LINE_SPLIT.split(changelog):
        if line.startswith(HEADING_PREFIX):
            if in_section:
                break
            in_section = _heading_matches(line, version)
            found = found or in_section
            continue
        if in_section:
            output.append(line)

    if not found:
        raise VersionNotFoundError(f"version {version} not found in {source}")

    return "\n".join(output).strip() + "\n"


def read_release_notes(version: str, changelog_path: Union[str, Path] = DEFAULT_CHANGELOG) -> str:
    """Read a changelog file and extract one version's section"""
    path = Path(changelog_path)
    return extract_release_notes(version, path.read_text(encoding="utf-8"), source=path.name)
