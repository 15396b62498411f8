"""Single-word shortcuts that set the status label of a pull request."""

from __future__ import annotations

import enum
from collections.abc import Iterable

WAITING_ON_REVIEW = "S-waiting-on-review"
WAITING_ON_AUTHOR = "S-waiting-on-author"
BLOCKED = "S-blocked"

STATUS_LABELS = (WAITING_ON_REVIEW, WAITING_ON_AUTHOR, BLOCKED)


class Shortcut(enum.Enum):
    """A status shortcut and the label it sets."""

    READY = WAITING_ON_REVIEW
    AUTHOR = WAITING_ON_AUTHOR
    BLOCKED = BLOCKED

    @property
    def label(self) -> str:
        return self.value


def status_label_changes(
    shortcut: Shortcut, current_labels: Iterable[str]
) -> tuple[list[str], list[str]]:
    """Labels to remove and labels to add so that the shortcut's status is set.

    Nothing changes if the issue already carries the shortcut's label.
    """
    add = shortcut.label
    if add in set(current_labels):
        return [], []
    remove = [label for label in STATUS_LABELS if label != add]
    return remove, [add]