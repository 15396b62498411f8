"""Summary notes kept in a bot-owned section of an issue body."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

log = logging.getLogger(__name__)

_HEADER = "\n### Summary Notes\n"
_FOOTER = "\n\nGenerated by triagebot, see the Note help page for how to add more"


@dataclass
class NoteDataEntry:
    """One summary note linking to the comment that created it."""

    title: str
    comment_url: str
    author: str

    def __lt__(self, other: NoteDataEntry) -> bool:
        return self.comment_url < other.comment_url

    def to_markdown(self) -> str:
        """The Markdown list item for this note."""
        return f'\n- ["{self.title}" by @{self.author}]({self.comment_url})'

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "comment_url": self.comment_url, "author": self.author}


@dataclass
class NoteData:
    """All summary notes of an issue, keyed by comment URL."""

    entries_by_url: dict[str, NoteDataEntry] = field(default_factory=dict)

    def get_url_from_title(self, title: str) -> str | None:
        """The URL of the first note (by URL order) with the given title."""
        for url in sorted(self.entries_by_url):
            if self.entries_by_url[url].title == title:
                return url
        return None

    def remove_by_title(self, title: str) -> NoteDataEntry | None:
        """Remove and return the note with the given title, if there is one."""
        url = self.get_url_from_title(title)
        if url is None:
            log.debug("unable to remove entry with title %r", title)
            return None
        return self.entries_by_url.pop(url)

    def add_summary(self, title: str, comment_url: str, author: str) -> NoteDataEntry:
        """Add a note for a comment, or retitle the existing note for it."""
        existing = self.entries_by_url.get(comment_url)
        if existing is not None:
            existing.title = title
            return existing
        entry = NoteDataEntry(title=title, comment_url=comment_url, author=author)
        self.entries_by_url[comment_url] = entry
        return entry

    def to_markdown(self) -> str:
        """The Markdown section listing all notes; empty if there are none."""
        if not self.entries_by_url:
            return ""
        items = "".join(
            self.entries_by_url[url].to_markdown() for url in sorted(self.entries_by_url)
        )
        return f"{_HEADER}{items}{_FOOTER}"

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form of the notes."""
        return {
            "entries_by_url": {
                url: entry.to_dict() for url, entry in self.entries_by_url.items()
            }
        }


def load_note_data(data: Any) -> NoteData:
    """Build NoteData from its JSON form; None gives empty notes."""
    if data is None:
        return NoteData()
    entries = data.get("entries_by_url", {})
    return NoteData(
        entries_by_url={
            url: NoteDataEntry(
                title=entry["title"],
                comment_url=entry["comment_url"],
                author=entry["author"],
            )
            for url, entry in entries.items()
        }
    )