"""Reviewer candidates from a diff, plus the texts posted on new pull requests."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from triagebot.reviewers import AssignConfig

NEW_USER_WELCOME_MESSAGE = (
    "Thanks for the pull request, and welcome! The Rust team is excited to review "
    "your changes, and you should hear from {who} soon."
)

CONTRIBUTION_MESSAGE = (
    "Please see [the contribution instructions]({contributing_url}) for more information."
)

WELCOME_WITH_REVIEWER = "@{assignee} (or someone else)"

WELCOME_WITHOUT_REVIEWER = (
    "the repository maintainers (NB. this repo may be misconfigured)"
)

RETURNING_USER_WELCOME_MESSAGE = (
    "r? @{assignee}\n\n(rustbot has picked a reviewer for you, use r? to override)"
)

RETURNING_USER_WELCOME_MESSAGE_NO_REVIEWER = (
    "@{author}: no appropriate reviewer found, use r? to override"
)

NON_DEFAULT_BRANCH = (
    "Pull requests are usually filed against the {default} branch for this repo, "
    "but this one is against {target}. "
    "Please double check that you specified the right target!"
)

SUBMODULE_WARNING_MSG = "These commits modify **submodules**."

_SUBMODULE_RE = re.compile(r"\+Subproject\scommit\s")


@dataclass(frozen=True)
class _GitignorePattern:
    regex: re.Pattern[str] | None
    whitelist: bool
    dir_only: bool

    def matched_path_or_any_parents(self, path: str) -> bool:
        """True if the path, or a directory containing it, is ignored by this pattern."""
        if self.regex is None:
            return False
        components = [part for part in path.split("/") if part]
        for n in range(len(components), 0, -1):
            is_dir = n < len(components)
            if self.dir_only and not is_dir:
                continue
            if self.regex.fullmatch("/".join(components[:n])):
                return not self.whitelist
        return False


def _glob_to_regex(glob: str) -> str:
    out: list[str] = []
    i = 0
    at_segment_start = True
    while i < len(glob):
        if at_segment_start and glob.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
            continue
        if at_segment_start and glob.startswith("**", i) and i + 2 == len(glob):
            out.append(".*")
            i += 2
            continue
        char = glob[i]
        if char == "*":
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
        elif char == "[":
            j = i + 1
            negate = j < len(glob) and glob[j] in "!^"
            if negate:
                j += 1
            if j < len(glob) and glob[j] == "]":
                j += 1
            while j < len(glob) and glob[j] != "]":
                j += 1
            if j >= len(glob):
                raise ValueError(f"unclosed character class in {glob!r}")
            start = i + 2 if negate else i + 1
            content = glob[start:j].replace("\\", "\\\\")
            out.append(f"[{'^' if negate else ''}{content}]")
            i = j + 1
            at_segment_start = False
            continue
        elif char == "\\":
            if i + 1 >= len(glob):
                raise ValueError(f"dangling escape in {glob!r}")
            out.append(re.escape(glob[i + 1]))
            i += 1
        else:
            out.append(re.escape(char))
        at_segment_start = char == "/"
        i += 1
    return "".join(out)


def _compile_gitignore(line: str) -> _GitignorePattern:
    pattern = line
    if not pattern or pattern.startswith("#"):
        return _GitignorePattern(regex=None, whitelist=False, dir_only=False)
    whitelist = pattern.startswith("!")
    if whitelist:
        pattern = pattern[1:]
    dir_only = pattern.endswith("/")
    if dir_only:
        pattern = pattern[:-1]
    anchored = "/" in pattern
    if pattern.startswith("/"):
        pattern = pattern[1:]
    if not anchored and not pattern.startswith("**/"):
        pattern = "**/" + pattern
    regex = re.compile(_glob_to_regex(pattern))
    return _GitignorePattern(regex=regex, whitelist=whitelist, dir_only=dir_only)


def _diff_path(line: str) -> str:
    idx = line.find(" b/")
    if idx < 0:
        raise ValueError(f"malformed diff header: {line!r}")
    return line[idx + len(" b/"):]


def find_reviewers_from_diff(config: AssignConfig, diff: str) -> list[str]:
    """Candidate reviewers from the owners whose paths saw the most changes.

    Raises ValueError if an owners pattern is not a valid gitignore pattern.
    """
    compiled: dict[str, _GitignorePattern] = {}
    for owner_pattern in config.owners:
        try:
            compiled[owner_pattern] = _compile_gitignore(owner_pattern)
        except ValueError as exc:
            raise ValueError(f"owner file pattern `{owner_pattern}` is not valid") from exc

    counts: Counter[str] = Counter()
    longest_patterns: list[str] = []
    for line in diff.split("\n"):
        if line.startswith("diff --git "):
            path = _diff_path(line)
            matching = {
                pattern: len(pattern.split("/"))
                for pattern, matcher in compiled.items()
                if matcher.matched_path_or_any_parents(path)
            }
            max_len = max(matching.values(), default=0)
            longest_patterns = [p for p, n in matching.items() if n == max_len]
            counts.update(longest_patterns)
            continue
        modified = (line.startswith("+") and not line.startswith("+++")) or (
            line.startswith("-") and not line.startswith("---")
        )
        if modified:
            counts.update(longest_patterns)

    max_count = max(counts.values(), default=0)
    potential = {
        owner
        for path, count in counts.items()
        if count == max_count
        for owner in config.owners[path]
    }
    return sorted(potential)


def modifies_submodule(diff: str) -> str | None:
    """A warning if the diff changes a git submodule."""
    return SUBMODULE_WARNING_MSG if _SUBMODULE_RE.search(diff) else None


def non_default_branch(target_branch: str, default_branch: str) -> str | None:
    """A warning if the pull request targets a branch other than the default."""
    if target_branch == default_branch:
        return None
    return NON_DEFAULT_BRANCH.replace("{default}", default_branch).replace(
        "{target}", target_branch
    )


def welcome_message(
    assignee: str | None,
    author: str,
    new_contributor: bool,
    from_comment: bool,
    contributing_url: str | None,
) -> str | None:
    """The welcome comment for a new pull request, or None if none is posted."""
    if new_contributor:
        if assignee is not None:
            who = WELCOME_WITH_REVIEWER.replace("{assignee}", assignee)
        else:
            who = WELCOME_WITHOUT_REVIEWER
        welcome = NEW_USER_WELCOME_MESSAGE.replace("{who}", who)
        if contributing_url is not None:
            welcome += "\n\n" + CONTRIBUTION_MESSAGE.replace(
                "{contributing_url}", contributing_url
            )
        return welcome
    if from_comment:
        return None
    if assignee is not None:
        return RETURNING_USER_WELCOME_MESSAGE.replace("{assignee}", assignee)
    return RETURNING_USER_WELCOME_MESSAGE_NO_REVIEWER.replace("{author}", author)


def warnings_comment(warnings: Iterable[str]) -> str | None:
    """A comment listing the warnings, or None if there are none."""
    items = [f"* {warning}" for warning in warnings]
    if not items:
        return None
    return ":warning: **Warning** :warning:\n\n" + "\n".join(items)