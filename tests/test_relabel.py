import pytest

from triagebot.relabel import (
    CheckFilterResult,
    MatchPatternResult,
    PatternError,
    TeamMembership,
    check_filter,
    match_pattern,
)

CONFIG = ["T-*", "I-*", "!I-*nominated"]


@pytest.mark.parametrize(
    "pattern, label, expected",
    [
        ("I-*", "I-nominated", MatchPatternResult.ALLOW),
        ("!I-no*", "I-nominated", MatchPatternResult.DENY),
        ("I-*", "T-infra", MatchPatternResult.NO_MATCH),
        ("!I-no*", "T-infra", MatchPatternResult.NO_MATCH),
    ],
)
def test_match_pattern(pattern, label, expected):
    assert match_pattern(pattern, label) == expected


@pytest.mark.parametrize(
    "membership, label, expected",
    [
        (TeamMembership.MEMBER, "T-release", CheckFilterResult.ALLOW),
        (TeamMembership.MEMBER, "I-slow", CheckFilterResult.ALLOW),
        (TeamMembership.MEMBER, "I-lang-nominated", CheckFilterResult.ALLOW),
        (TeamMembership.MEMBER, "I-nominated", CheckFilterResult.ALLOW),
        (TeamMembership.MEMBER, "A-spurious", CheckFilterResult.ALLOW),
        (TeamMembership.OUTSIDER, "T-release", CheckFilterResult.ALLOW),
        (TeamMembership.OUTSIDER, "I-slow", CheckFilterResult.ALLOW),
        (TeamMembership.OUTSIDER, "I-lang-nominated", CheckFilterResult.DENY),
        (TeamMembership.OUTSIDER, "I-nominated", CheckFilterResult.DENY),
        (TeamMembership.OUTSIDER, "A-spurious", CheckFilterResult.DENY),
        (TeamMembership.UNKNOWN, "T-release", CheckFilterResult.ALLOW),
        (TeamMembership.UNKNOWN, "I-slow", CheckFilterResult.ALLOW),
        (TeamMembership.UNKNOWN, "I-lang-nominated", CheckFilterResult.DENY_UNKNOWN),
        (TeamMembership.UNKNOWN, "I-nominated", CheckFilterResult.DENY_UNKNOWN),
        (TeamMembership.UNKNOWN, "A-spurious", CheckFilterResult.DENY_UNKNOWN),
    ],
)
def test_check_filter(membership, label, expected):
    assert check_filter(label, CONFIG, membership) == expected


def test_question_mark_matches_single_character():
    assert match_pattern("T-?", "T-x") == MatchPatternResult.ALLOW
    assert match_pattern("T-?", "T-xy") == MatchPatternResult.NO_MATCH


def test_character_class():
    assert match_pattern("[AT]-*", "A-diagnostics") == MatchPatternResult.ALLOW
    assert match_pattern("[!AT]-*", "A-diagnostics") == MatchPatternResult.NO_MATCH


def test_match_is_case_sensitive():
    assert match_pattern("t-*", "T-release") == MatchPatternResult.NO_MATCH


@pytest.mark.parametrize("pattern", ["[a", "a***", "a**b"])
def test_invalid_pattern_raises(pattern):
    with pytest.raises(PatternError):
        match_pattern(pattern, "anything")


def test_check_filter_invalid_pattern_raises_for_outsider():
    with pytest.raises(PatternError, match="failed to match pattern"):
        check_filter("T-release", ["[T"], TeamMembership.OUTSIDER)


def test_check_filter_member_skips_patterns():
    assert check_filter("T-release", ["[T"], TeamMembership.MEMBER) == CheckFilterResult.ALLOW


def test_check_filter_empty_config_denies_outsider():
    assert check_filter("T-release", [], TeamMembership.OUTSIDER) == CheckFilterResult.DENY