"""Selection of reviewers from user names, ad-hoc groups and teams."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass
class AssignConfig:
    """The ``[assign]`` configuration of a repository."""

    owners: dict[str, list[str]] = field(default_factory=dict)
    adhoc_groups: dict[str, list[str]] = field(default_factory=dict)
    contributing_url: str | None = None
    warn_non_default_branch: bool = False


@dataclass
class IssueRef:
    """What reviewer selection needs to know about an issue or pull request."""

    author: str
    organization: str
    assignees: list[str] = field(default_factory=list)


class FindReviewerError(Exception):
    """Base class for failures to find a reviewer."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class TeamNotFound(FindReviewerError):
    """A name like ``foo/bar`` did not match any team or group."""

    def __init__(self, team: str):
        super().__init__(team)
        self.team = team

    def __str__(self) -> str:
        return (
            f"Team or group `{self.team}` not found.\n"
            "\n"
            "Team names can be found in the team repository.\n"
            "Reviewer group names can be found in `triagebot.toml` in this repo."
        )


class NoReviewer(FindReviewerError):
    """No reviewer could be found, for example because of cyclical groups."""

    def __init__(self, initial: Sequence[str]):
        self.initial = list(initial)
        super().__init__(tuple(self.initial))

    def __str__(self) -> str:
        return (
            f"No reviewers could be found from initial request `{','.join(self.initial)}`\n"
            "This repo may be misconfigured.\n"
            "Use r? to specify someone else to assign."
        )


class AllReviewersFiltered(FindReviewerError):
    """Every candidate was the author or an existing assignee."""

    def __init__(self, initial: Sequence[str], filtered: Sequence[str]):
        self.initial = list(initial)
        self.filtered = list(filtered)
        super().__init__(tuple(self.initial), tuple(self.filtered))

    def __str__(self) -> str:
        return (
            f"Could not assign reviewer from: `{','.join(self.initial)}`.\n"
            f"User(s) `{','.join(self.filtered)}` are either the PR author or are "
            "already assigned, and there are no other candidates.\n"
            "Use r? to specify someone else to assign."
        )


def is_self_assign(assignee: str, pr_author: str) -> bool:
    """True if the assignee is the author, ignoring case."""
    return assignee.lower() == pr_author.lower()


def _strip_prefix(text: str, prefix: str) -> str:
    return text[len(prefix):] if text.startswith(prefix) else text


def candidate_reviewers_from_names(
    teams: Mapping[str, Iterable[str]],
    config: AssignConfig,
    issue: IssueRef,
    names: Sequence[str],
) -> set[str]:
    """Expand names, groups and teams into the set of candidate reviewers."""
    candidates: set[str] = set()
    seen: set[str] = set()
    expansion = list(names)
    filtered: list[str] = []
    org_prefix = f"{issue.organization}/"
    author = issue.author.lower()
    assignees = {assignee.lower() for assignee in issue.assignees}

    def allowed(name: str) -> bool:
        lowered = name.lower()
        ok = lowered != author and lowered not in assignees
        if not ok:
            filtered.append(name)
        return ok

    while expansion:
        group_or_user = _strip_prefix(expansion.pop(), "@")

        maybe_group = _strip_prefix(group_or_user, org_prefix)
        members = config.adhoc_groups.get(maybe_group)
        if members is not None:
            if maybe_group not in seen:
                seen.add(maybe_group)
                expansion.extend(member for member in members if allowed(member))
            continue

        maybe_team = _strip_prefix(group_or_user, "rust-lang/")
        team_members = teams.get(maybe_team)
        if team_members is not None:
            candidates.update(member for member in team_members if allowed(member))
            continue

        if "/" in group_or_user:
            raise TeamNotFound(group_or_user)

        if allowed(group_or_user):
            candidates.add(group_or_user)

    if not candidates:
        if filtered:
            raise AllReviewersFiltered(names, filtered)
        raise NoReviewer(names)
    return candidates


def find_reviewer_from_names(
    teams: Mapping[str, Iterable[str]],
    config: AssignConfig,
    issue: IssueRef,
    names: Sequence[str],
) -> str:
    """Pick one reviewer at random from the candidates for ``names``."""
    candidates = candidate_reviewers_from_names(teams, config, issue, names)
    return random.choice(sorted(candidates))