"""
Release notes extraction from CHANGELOG.md
"""

from mcpskill.release.notes import extract_release_notes, read_release_notes, normalize_version

__all__ = ["extract_release_notes", "read_release_notes", "normalize_version"]
