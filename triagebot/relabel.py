"""Rules for who may add or remove which labels through comments."""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable

log = logging.getLogger(__name__)


class TeamMembership(enum.Enum):
    """Whether the commenting user is known to be a team member."""

    MEMBER = "member"
    OUTSIDER = "outsider"
    UNKNOWN = "unknown"


class CheckFilterResult(enum.Enum):
    """Outcome of checking a label against the allowed patterns."""

    ALLOW = "allow"
    DENY = "deny"
    DENY_UNKNOWN = "deny_unknown"


class MatchPatternResult(enum.Enum):
    """Outcome of matching one pattern against a label."""

    ALLOW = "allow"
    DENY = "deny"
    NO_MATCH = "no_match"


class PatternError(ValueError):
    """Raised when a glob pattern is not valid."""


def _bracket_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate a ``[...]`` class starting at ``start``; return regex and next index."""
    i = start + 1
    negate = i < len(pattern) and pattern[i] == "!"
    if negate:
        i += 1
    content_start = i
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    while i < len(pattern) and pattern[i] != "]":
        i += 1
    if i >= len(pattern):
        raise PatternError(f"invalid range pattern in {pattern!r}")
    content = pattern[content_start:i]

    parts: list[str] = []
    k = 0
    while k < len(content):
        if k + 2 < len(content) and content[k + 1] == "-":
            parts.append(f"{re.escape(content[k])}-{re.escape(content[k + 2])}")
            k += 3
        else:
            parts.append(re.escape(content[k]))
            k += 1
    return f"[{'^' if negate else ''}{''.join(parts)}]", i + 1


def _glob_regex(pattern: str) -> re.Pattern[str]:
    out: list[str] = []
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]
        if char == "*":
            j = i
            while j < length and pattern[j] == "*":
                j += 1
            count = j - i
            if count > 2:
                raise PatternError(
                    f"wildcards are either regular `*` or recursive `**` in {pattern!r}"
                )
            if count == 2:
                if (i > 0 and pattern[i - 1] != "/") or (j < length and pattern[j] != "/"):
                    raise PatternError(
                        f"recursive wildcards must form a single path component in {pattern!r}"
                    )
                if j < length:
                    out.append("(?:.*/)?")
                    j += 1
                else:
                    out.append(".*")
            else:
                out.append(".*")
            i = j
        elif char == "?":
            out.append(".")
            i += 1
        elif char == "[":
            translated, i = _bracket_class(pattern, i)
            out.append(translated)
        else:
            out.append(re.escape(char))
            i += 1
    return re.compile("".join(out), re.DOTALL)


def match_pattern(pattern: str, label: str) -> MatchPatternResult:
    """Match a label against a glob; a leading ``!`` turns a match into a deny."""
    inverse = pattern.startswith("!")
    if inverse:
        pattern = pattern[1:]
    matched = _glob_regex(pattern).fullmatch(label) is not None
    if not matched:
        return MatchPatternResult.NO_MATCH
    return MatchPatternResult.DENY if inverse else MatchPatternResult.ALLOW


def check_filter(
    label: str,
    allow_unauthenticated: Iterable[str],
    membership: TeamMembership,
) -> CheckFilterResult:
    """Decide whether a user with ``membership`` may change ``label``.

    Raises PatternError if one of the configured patterns is invalid.
    """
    if membership is TeamMembership.MEMBER:
        return CheckFilterResult.ALLOW
    matched = False
    for pattern in allow_unauthenticated:
        try:
            result = match_pattern(pattern, label)
        except PatternError as exc:
            log.error("failed to match pattern %s: %s", pattern, exc)
            raise PatternError(f"failed to match pattern {pattern}") from exc
        if result is MatchPatternResult.ALLOW:
            matched = True
        elif result is MatchPatternResult.DENY:
            # An explicit deny overrides any allowed pattern.
            matched = False
            break
    if matched:
        return CheckFilterResult.ALLOW
    if membership is TeamMembership.OUTSIDER:
        return CheckFilterResult.DENY
    return CheckFilterResult.DENY_UNKNOWN