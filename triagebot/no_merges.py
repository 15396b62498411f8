"""Warnings about merge commits in pull requests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

NO_MERGES_KEY = "no_merges"

_MESSAGE = """
        There are merge commits (commits with multiple parents) in your changes. We have a
        no merge policy so
        these commits will need to be removed for this pull request to be merged.

        You can start a rebase with the following commands:

        ```shell-session
        $ # rebase
        $ git rebase -i master
        $ # delete any merge commits in the editor that appears
        $ git push --force-with-lease
        ```

        The following commits are merge commits{since_last_posted}:

    """

_SINCE_LAST_POSTED = " (since this message was last posted)"


@dataclass
class NoMergesState:
    """Merge commits that have already been mentioned in a comment."""

    mentioned_merge_commits: set[str] = field(default_factory=set)

    def build_message(self, merge_commits: Iterable[str]) -> str | None:
        """The comment listing merge commits not mentioned before, or None.

        The newly listed commits are recorded as mentioned.
        """
        since = _SINCE_LAST_POSTED if self.mentioned_merge_commits else ""
        message = _MESSAGE.format(since_last_posted=since)
        should_send = False
        for commit in sorted(set(merge_commits)):
            if commit in self.mentioned_merge_commits:
                continue
            should_send = True
            self.mentioned_merge_commits.add(commit)
            message += f"- {commit}"
        return message if should_send else None


def merge_commits(commits: Iterable[Mapping[str, Any]]) -> set[str]:
    """Hashes of the commits that have more than one parent."""
    return {commit["sha"] for commit in commits if len(commit.get("parents", ())) > 1}