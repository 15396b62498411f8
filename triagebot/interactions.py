"""Comment bodies and bot-owned sections inside an issue body."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

START_BOT = "<!-- TRIAGEBOT_START -->\n\n"
END_BOT = "<!-- TRIAGEBOT_END -->"


def normalize_body(body: str) -> str:
    """Convert CRLF line endings to LF."""
    return body.replace("\r\n", "\n")


def error_comment_body(message: str) -> str:
    """Body of a comment that reports an error to the user."""
    return (
        f"**Error**: {message}\n"
        "\n"
        "Please file an issue on GitHub at triagebot if there's a problem with "
        "this bot, or reach out on #t-infra on Zulip.\n"
    )


def ping_comment_body(users: Iterable[str]) -> str:
    """Body of a comment that pings each of the given users."""
    return "".join(f"@{user} " for user in users)


@dataclass
class EditIssueBody:
    """A named section with attached JSON data, kept inside an issue body."""

    body: str
    section: str

    @property
    def _start_section(self) -> str:
        return f"<!-- TRIAGEBOT_{self.section}_START -->\n"

    @property
    def _end_section(self) -> str:
        return f"\n<!-- TRIAGEBOT_{self.section}_END -->\n"

    @property
    def _data_start(self) -> str:
        return f"\n<!-- TRIAGEBOT_{self.section}_DATA_START$$"

    @property
    def _data_end(self) -> str:
        return f"$$TRIAGEBOT_{self.section}_DATA_END -->\n"

    def _current(self) -> str | None:
        body = normalize_body(self.body)
        if START_BOT not in body or self._start_section not in body:
            return None
        start = body.index(self._start_section)
        end = body.index(self._end_section)
        return body[start : end + len(self._end_section)]

    def current_data(self) -> Any | None:
        """The JSON data stored in this section, or None if the section is absent."""
        current = self._current()
        if current is None:
            return None
        start = current.index(self._data_start) + len(self._data_start)
        end = current.index(self._data_end)
        text = current[start:end]
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"deserializing data {text!r} failed: {exc}") from exc

    def _data_section(self, data: Any) -> str:
        encoded = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return f"{self._data_start}{encoded}{self._data_end}"

    def apply(self, text: str, data: Any) -> str:
        """Return the issue body with this section set to ``text`` and ``data``."""
        body = normalize_body(self.body)
        start_section = self._start_section
        end_section = self._end_section
        bot_section = f"{start_section}{text}{self._data_section(data)}{end_section}"
        empty_bot_section = f"{start_section}{end_section}"
        all_new = f"\n\n{START_BOT}{bot_section}{END_BOT}"

        if START_BOT not in body:
            return body + all_new
        if start_section in body:
            start = body.index(start_section)
            end = body.index(end_section) + len(end_section)
            body = body[:start] + bot_section + body[end:]
            if all_new in body and bot_section == empty_bot_section:
                idx = body.index(all_new)
                body = body[:idx] + body[idx + len(all_new) :]
            return body
        idx = body.index(END_BOT)
        return body[:idx] + bot_section + body[idx:]