import copy

import pytest

from triagebot.rfcbot import index_fcps, parse_full_fcp

SAMPLE = {
    "fcp": {
        "id": 1,
        "fk_issue": 2,
        "fk_initiator": 3,
        "fk_initiating_comment": 4,
        "disposition": "merge",
        "fk_bot_tracking_comment": 5,
        "fcp_start": None,
        "fcp_closed": False,
    },
    "reviews": [
        {"reviewer": {"id": 10, "login": "alice"}, "approved": True},
        {"reviewer": {"id": 11, "login": "bob"}, "approved": False},
    ],
    "issue": {
        "id": 2,
        "number": 42,
        "fk_milestone": None,
        "fk_user": 3,
        "fk_assignee": None,
        "open": True,
        "is_pull_request": False,
        "title": "Some RFC",
        "body": "text",
        "locked": False,
        "closed_at": None,
        "created_at": "2023-01-01",
        "updated_at": None,
        "labels": ["T-lang"],
        "repository": "rust-lang/rfcs",
    },
    "status_comment": {
        "id": 99,
        "fk_issue": 2,
        "fk_user": 3,
        "body": "status",
        "created_at": "2023-01-02",
        "updated_at": None,
        "repository": "rust-lang/rfcs",
    },
}


def test_parse_full_fcp_fields():
    full = parse_full_fcp(SAMPLE)
    assert full.fcp.disposition == "merge"
    assert full.fcp.fcp_closed is False
    assert [r.reviewer.login for r in full.reviews] == ["alice", "bob"]
    assert [r.approved for r in full.reviews] == [True, False]
    assert full.issue.number == 42
    assert full.issue.labels == ["T-lang"]
    assert full.status_comment.id == 99


def test_parse_missing_field_raises():
    data = copy.deepcopy(SAMPLE)
    del data["issue"]["title"]
    with pytest.raises(KeyError):
        parse_full_fcp(data)


def test_index_key_format():
    full = parse_full_fcp(SAMPLE)
    index = index_fcps([full])
    assert list(index) == ["rust-lang/rfcs:42:Some RFC"]
    assert index["rust-lang/rfcs:42:Some RFC"] is full


def test_index_later_entry_wins():
    first = parse_full_fcp(SAMPLE)
    data = copy.deepcopy(SAMPLE)
    data["fcp"]["id"] = 7
    second = parse_full_fcp(data)
    index = index_fcps([first, second])
    assert len(index) == 1
    assert next(iter(index.values())).fcp.id == 7


def test_index_distinct_issues():
    data = copy.deepcopy(SAMPLE)
    data["issue"]["number"] = 43
    index = index_fcps([parse_full_fcp(SAMPLE), parse_full_fcp(data)])
    assert sorted(index) == ["rust-lang/rfcs:42:Some RFC", "rust-lang/rfcs:43:Some RFC"]