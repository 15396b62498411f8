import pytest

from triagebot.team import Team, parse_team


@pytest.mark.parametrize(
    "name,team,label",
    [
        ("libs", Team.LIBS, "T-libs"),
        ("compiler", Team.COMPILER, "T-compiler"),
        ("lang", Team.LANG, "T-lang"),
    ],
)
def test_parse_and_label(name, team, label):
    assert parse_team(name) is team
    assert team.label() == label


def test_unknown_team():
    with pytest.raises(ValueError, match="unknown team"):
        parse_team("infra")


def test_names_are_case_sensitive():
    with pytest.raises(ValueError):
        parse_team("Libs")