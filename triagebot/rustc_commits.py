"""Parsing of build-completion comments and merge commit messages."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)

BORS_GH_ID = 3372342

JOB_NAME = "rustc_commits"
JOB_SCHEDULE = "* 0,30 * * * * *"

_START_MARKER = "<!-- homu: "
_END_MARKER = " -->"
_MERGE_PREFIX = "Auto merge of #"
_NUMBER_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class BorsMessage:
    """The machine-readable part of a bors build comment."""

    type: str
    base_ref: str
    merge_sha: str


def parse_bors_comment(body: str) -> BorsMessage | None:
    """Extract the bors message embedded in a comment, or None if there is none."""
    start = body.find(_START_MARKER)
    end = body.find(_END_MARKER)
    if start < 0 or end < 0:
        log.warning("Unable to extract build completion from comment %r", body)
        return None
    start += len(_START_MARKER)
    if end < start:
        log.warning("Unable to extract build completion from comment %r", body)
        return None
    text = body[start:end]
    try:
        data = json.loads(text)
        message = BorsMessage(
            type=data["type"], base_ref=data["base_ref"], merge_sha=data["merge_sha"]
        )
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        log.error("failed to parse build completion from %r: %s", text, exc)
        return None
    if not all(isinstance(v, str) for v in (message.type, message.base_ref, message.merge_sha)):
        log.error("failed to parse build completion from %r", text)
        return None
    return message


def pr_number_from_commit_message(message: str) -> int | None:
    """The pull request number of a merge commit, from its message."""
    if not message.startswith(_MERGE_PREFIX):
        return None
    tail = message[len(_MERGE_PREFIX):]
    end = tail.find(" ")
    if end < 0:
        return None
    digits = tail[:end]
    if not _NUMBER_RE.fullmatch(digits):
        return None
    number = int(digits)
    if number >= 2**32:
        return None
    return number