import pytest

from triagebot.notify_zulip import (
    LabelConfig,
    NotificationType,
    close_reopen_notifications,
    format_message,
    format_topic,
    has_all_required_labels,
    label_change_notification,
    message_for,
)


def make_config(**kwargs):
    return LabelConfig(zulip_stream=1, topic="#{number} {title}", **kwargs)


def test_required_labels_match_globs():
    config = make_config(required_labels=["I-*"])
    assert has_all_required_labels(["I-prioritize", "T-lang"], config) is True
    assert has_all_required_labels(["T-lang"], config) is False


def test_no_required_labels_always_true():
    assert has_all_required_labels([], make_config()) is True


def test_invalid_required_pattern_is_ignored():
    config = make_config(required_labels=["[abc"])
    assert has_all_required_labels([], config) is True


def test_labeled_notification():
    config = make_config(message_on_add="added")
    assert label_change_notification("labeled", ["x"], config) is NotificationType.LABELED
    assert label_change_notification("unlabeled", ["x"], config) is None


def test_unlabeled_notification():
    config = make_config(message_on_remove="removed")
    assert (
        label_change_notification("unlabeled", [], config)
        is NotificationType.UNLABELED
    )
    assert label_change_notification("labeled", [], config) is None


def test_label_change_requires_labels():
    config = make_config(message_on_add="added", required_labels=["T-*"])
    assert label_change_notification("labeled", ["I-x"], config) is None
    assert label_change_notification("labeled", ["T-x"], config) is NotificationType.LABELED


def test_close_reopen_notifications():
    configs = {
        "a": make_config(message_on_close="closed"),
        "b": make_config(message_on_reopen="reopened"),
    }
    labels = ["a", "b", "c"]
    assert close_reopen_notifications("closed", labels, configs) == [
        ("a", NotificationType.CLOSED)
    ]
    assert close_reopen_notifications("reopened", labels, configs) == [
        ("b", NotificationType.REOPENED)
    ]
    assert close_reopen_notifications("edited", labels, configs) == []


def test_close_respects_required_labels():
    configs = {"a": make_config(message_on_close="closed", required_labels=["z"])}
    assert close_reopen_notifications("closed", ["a"], configs) == []


def test_format_topic_substitutes():
    assert format_topic("{number} {title}", 5, "x") == "5 x"


def test_format_topic_truncates_long_topics():
    title = "t" * 100
    topic = format_topic("{title}", 1, title)
    assert len(topic) == 60
    assert topic.endswith("…")
    assert topic[:-1] == title[:59]


def test_format_topic_keeps_exact_limit():
    title = "t" * 60
    assert format_topic("{title}", 1, title) == title


def test_format_message():
    assert format_message("{title} ({number})", 7, "T") == "T (7)"


def test_message_for():
    config = make_config(message_on_close="bye")
    assert message_for(config, NotificationType.CLOSED) == "bye"
    with pytest.raises(ValueError):
        message_for(config, NotificationType.LABELED)