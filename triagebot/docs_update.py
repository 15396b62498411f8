"""The scheduled job that proposes updates of the documentation submodules."""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

WORK_REPO = "rustbot/rust"
DEST_REPO = "rust-lang/rust"
BRANCH_NAME = "docs-update"
TITLE = "Update books"

SUBMODULES = (
    "src/doc/book",
    "src/doc/edition-guide",
    "src/doc/embedded-book",
    "src/doc/nomicon",
    "src/doc/reference",
    "src/doc/rust-by-example",
    "src/doc/rustc-dev-guide",
)

JOB_NAME = "docs_update"
# Around 9am Pacific time on every Monday.
JOB_SCHEDULE = "0 00 17 * * Mon *"

_BASE_DATE = datetime.date(2015, 12, 10)


@dataclass(frozen=True)
class RecentCommit:
    """A commit in a submodule's history, as listed in the pull request body."""

    title: str
    committed_date: str
    pr_num: int | None = None


def _whole_weeks(days: int) -> int:
    """Whole weeks in ``days``, truncated toward zero."""
    return days // 7 if days >= 0 else -((-days) // 7)


def is_update_week(today: datetime.date) -> bool:
    """True on the weeks the job runs: every other week counted from the base date."""
    weeks = _whole_weeks((today - _BASE_DATE).days)
    return weeks % 2 == 0


def generate_pr_body(
    full_name: str, commits: Sequence[RecentCommit], oldest: str, newest: str
) -> str:
    """The pull request section describing the new commits of one submodule.

    Raises ValueError if there are no commits.
    """
    if not commits:
        raise ValueError(
            f"unexpected empty set of commits for {full_name} "
            f"oldest={oldest} newest={newest}"
        )
    lines = [
        f"## {full_name}\n",
        "\n",
        f"{len(commits)} commits in {oldest}..{newest}\n",
        f"{commits[0].committed_date} to {commits[-1].committed_date}\n",
        "\n",
    ]
    for commit in commits:
        item = f"- {commit.title}"
        if commit.pr_num is not None:
            item += f" ({full_name}#{commit.pr_num})"
        lines.append(item + "\n")
    return "".join(lines)


def combined_pr_body(bodies: Iterable[str]) -> str:
    """Join the per-submodule sections into the whole pull request body."""
    return "".join(f"{body}\n" for body in bodies)