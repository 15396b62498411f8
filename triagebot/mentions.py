"""Pinging interested people when a pull request touches configured paths."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath

MENTIONS_KEY = "mentions"


@dataclass
class MentionsPathConfig:
    """The message and people to notify for one path."""

    message: str | None = None
    cc: list[str] = field(default_factory=list)


def _starts_with(path: PurePosixPath, prefix: PurePosixPath) -> bool:
    return path.parts[: len(prefix.parts)] == prefix.parts


def paths_to_mention(
    paths: Mapping[str, MentionsPathConfig],
    files: Iterable[str],
    author: str,
    title: str,
    draft: bool,
) -> list[str]:
    """Configured paths touched by the changed files whose pings reach someone besides the author."""
    if title.startswith("Rollup of") or draft or "[beta] backport" in title:
        return []
    file_paths = [PurePosixPath(f) for f in files]
    result: list[str] = []
    for key, config in paths.items():
        prefix = PurePosixPath(key)
        touches = any(_starts_with(p, prefix) for p in file_paths)
        pings_non_author = not (
            len(config.cc) == 1 and config.cc[0].lstrip("@") == author
        )
        if touches and pings_non_author:
            result.append(key)
    return result


def mention_message(
    paths: Mapping[str, MentionsPathConfig],
    to_mention: Sequence[str],
    already_mentioned: Iterable[str],
) -> tuple[str | None, list[str]]:
    """The comment for paths not mentioned before, and the paths it mentions."""
    mentioned = set(already_mentioned)
    newly: list[str] = []
    sections: list[str] = []
    for path in to_mention:
        if path in mentioned:
            continue
        config = paths[path]
        section = config.message if config.message is not None else (
            f"Some changes occurred in {path}"
        )
        if config.cc:
            section += f"\n\ncc {', '.join(config.cc)}"
        sections.append(section)
        mentioned.add(path)
        newly.append(path)
    if not sections:
        return None, []
    return "\n\n".join(sections), newly