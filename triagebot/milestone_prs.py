"""Checks on the version a merged pull request is milestoned to."""

from __future__ import annotations


def is_plausible_version(version: str) -> bool:
    """True if the contents of ``src/version`` look like a release version."""
    version = version.strip()
    return version.startswith("1.") or len(version) >= 8