"""Teams known by name and their labels."""

from __future__ import annotations

import enum


class Team(enum.Enum):
    """A team that issues may be assigned to."""

    LIBS = "libs"
    COMPILER = "compiler"
    LANG = "lang"

    def label(self) -> str:
        """The name of the label for this team."""
        return f"T-{self.value}"


def parse_team(name: str) -> Team:
    """Look up a team by its name; raise ValueError for unknown teams."""
    try:
        return Team(name)
    except ValueError:
        raise ValueError(f'unknown team: "{name}"') from None