"""Zulip notifications triggered by labels being added, removed, closed or reopened."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from triagebot.relabel import PatternError, _glob_regex

log = logging.getLogger(__name__)

_TOPIC_LIMIT = 60


class NotificationType(enum.Enum):
    """What happened to the issue that carries a configured label."""

    LABELED = "labeled"
    UNLABELED = "unlabeled"
    CLOSED = "closed"
    REOPENED = "reopened"


@dataclass
class LabelConfig:
    """Zulip notification settings for one label."""

    zulip_stream: int
    topic: str
    message_on_add: str | None = None
    message_on_remove: str | None = None
    message_on_close: str | None = None
    message_on_reopen: str | None = None
    required_labels: list[str] = field(default_factory=list)


def has_all_required_labels(labels: Iterable[str], config: LabelConfig) -> bool:
    """True if every required label pattern matches one of ``labels``.

    Invalid patterns are logged and ignored.
    """
    labels = list(labels)
    for required in config.required_labels:
        try:
            pattern = _glob_regex(required)
        except PatternError as exc:
            log.error("Invalid glob pattern: %s", exc)
            continue
        if not any(pattern.fullmatch(label) for label in labels):
            return False
    return True


def label_change_notification(
    action: str, labels: Iterable[str], config: LabelConfig
) -> NotificationType | None:
    """The notification for a label being added or removed, if one is configured."""
    if not has_all_required_labels(labels, config):
        return None
    if action == "labeled" and config.message_on_add is not None:
        return NotificationType.LABELED
    if action == "unlabeled" and config.message_on_remove is not None:
        return NotificationType.UNLABELED
    return None


def close_reopen_notifications(
    action: str, labels: Iterable[str], configs: Mapping[str, LabelConfig]
) -> list[tuple[str, NotificationType]]:
    """Notifications for each configured label when an issue is closed or reopened."""
    labels = list(labels)
    notifications: list[tuple[str, NotificationType]] = []
    for label in labels:
        config = configs.get(label)
        if config is None or not has_all_required_labels(labels, config):
            continue
        if action == "closed" and config.message_on_close is not None:
            notifications.append((label, NotificationType.CLOSED))
        elif action == "reopened" and config.message_on_reopen is not None:
            notifications.append((label, NotificationType.REOPENED))
    return notifications


def _substitute(template: str, number: int, title: str) -> str:
    return template.replace("{number}", str(number)).replace("{title}", title)


def format_topic(template: str, number: int, title: str) -> str:
    """Fill in a topic template, truncating to Zulip's 60-character limit."""
    topic = _substitute(template, number, title)
    if len(topic) > _TOPIC_LIMIT:
        topic = topic[: _TOPIC_LIMIT - 1] + "…"
    return topic


def format_message(template: str, number: int, title: str) -> str:
    """Fill in a message template with the issue number and title."""
    return _substitute(template, number, title)


def message_for(config: LabelConfig, notification_type: NotificationType) -> str:
    """The configured message template for a notification type."""
    message = {
        NotificationType.LABELED: config.message_on_add,
        NotificationType.UNLABELED: config.message_on_remove,
        NotificationType.CLOSED: config.message_on_close,
        NotificationType.REOPENED: config.message_on_reopen,
    }[notification_type]
    if message is None:
        raise ValueError(f"no message configured for {notification_type.value}")
    return message