from triagebot.rustc_commits import (
    BorsMessage,
    parse_bors_comment,
    pr_number_from_commit_message,
)


def comment(payload):
    return f":sunny: Test successful <!-- homu: {payload} -->"


def test_parse_bors_comment():
    body = comment('{"type":"BuildCompleted","base_ref":"master","merge_sha":"abc"}')
    assert parse_bors_comment(body) == BorsMessage(
        type="BuildCompleted", base_ref="master", merge_sha="abc"
    )


def test_parse_ignores_extra_fields():
    body = comment(
        '{"type":"BuildCompleted","base_ref":"beta","merge_sha":"f00","builders":{}}'
    )
    parsed = parse_bors_comment(body)
    assert parsed.base_ref == "beta"
    assert parsed.merge_sha == "f00"


def test_parse_without_marker():
    assert parse_bors_comment("Test successful") is None


def test_parse_invalid_json():
    assert parse_bors_comment(comment("{not json")) is None


def test_parse_missing_field():
    assert parse_bors_comment(comment('{"type":"BuildCompleted"}')) is None


def test_parse_end_before_start():
    assert parse_bors_comment(" --> <!-- homu: {}") is None


def test_pr_number_from_merge_message():
    assert pr_number_from_commit_message("Auto merge of #12345 - user:branch") == 12345


def test_pr_number_requires_prefix():
    assert pr_number_from_commit_message("Merge pull request #12 from x") is None


def test_pr_number_requires_space():
    assert pr_number_from_commit_message("Auto merge of #123") is None


def test_pr_number_requires_digits():
    assert pr_number_from_commit_message("Auto merge of #abc - x") is None


def test_pr_number_out_of_range():
    assert pr_number_from_commit_message(f"Auto merge of #{2**32} - x") is None