"""Final comment periods as reported by the rfcbot service."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class FCP:
    """A final comment period."""

    id: int
    fk_issue: int
    fk_initiator: int
    fk_initiating_comment: int
    disposition: str | None
    fk_bot_tracking_comment: int
    fcp_start: str | None
    fcp_closed: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FCP:
        return cls(
            id=data["id"],
            fk_issue=data["fk_issue"],
            fk_initiator=data["fk_initiator"],
            fk_initiating_comment=data["fk_initiating_comment"],
            disposition=data.get("disposition"),
            fk_bot_tracking_comment=data["fk_bot_tracking_comment"],
            fcp_start=data.get("fcp_start"),
            fcp_closed=data["fcp_closed"],
        )


@dataclass
class Reviewer:
    """A team member asked to review a proposal."""

    id: int
    login: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Reviewer:
        return cls(id=data["id"], login=data["login"])


@dataclass
class Review:
    """A reviewer and whether they approved."""

    reviewer: Reviewer
    approved: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Review:
        return cls(reviewer=Reviewer.from_dict(data["reviewer"]), approved=data["approved"])


@dataclass
class FCPIssue:
    """The issue a final comment period is about."""

    id: int
    number: int
    fk_milestone: str | None
    fk_user: int
    fk_assignee: int | None
    open: bool
    is_pull_request: bool
    title: str
    body: str
    locked: bool
    closed_at: str | None
    created_at: str | None
    updated_at: str | None
    labels: list[str]
    repository: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FCPIssue:
        return cls(
            id=data["id"],
            number=data["number"],
            fk_milestone=data.get("fk_milestone"),
            fk_user=data["fk_user"],
            fk_assignee=data.get("fk_assignee"),
            open=data["open"],
            is_pull_request=data["is_pull_request"],
            title=data["title"],
            body=data["body"],
            locked=data["locked"],
            closed_at=data.get("closed_at"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            labels=list(data["labels"]),
            repository=data["repository"],
        )


@dataclass
class StatusComment:
    """The bot's comment tracking the status of a final comment period."""

    id: int
    fk_issue: int
    fk_user: int
    body: str
    created_at: str
    updated_at: str | None
    repository: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StatusComment:
        return cls(
            id=data["id"],
            fk_issue=data["fk_issue"],
            fk_user=data["fk_user"],
            body=data["body"],
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
            repository=data["repository"],
        )


@dataclass
class FullFCP:
    """A final comment period with its reviews, issue and status comment."""

    fcp: FCP
    reviews: list[Review]
    issue: FCPIssue
    status_comment: StatusComment

    @property
    def key(self) -> str:
        """Key of the form ``repository:number:title``."""
        return f"{self.issue.repository}:{self.issue.number}:{self.issue.title}"


def parse_full_fcp(data: Mapping[str, Any]) -> FullFCP:
    """Build a FullFCP from one entry of the service's JSON listing.

    Raises KeyError if a required field is missing.
    """
    return FullFCP(
        fcp=FCP.from_dict(data["fcp"]),
        reviews=[Review.from_dict(review) for review in data["reviews"]],
        issue=FCPIssue.from_dict(data["issue"]),
        status_comment=StatusComment.from_dict(data["status_comment"]),
    )


def index_fcps(fcps: Iterable[FullFCP]) -> dict[str, FullFCP]:
    """Map each FCP by ``repository:number:title``; later entries win."""
    return {fcp.key: fcp for fcp in fcps}