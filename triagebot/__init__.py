"""Decision logic for an issue and pull request triage bot: reviewers, labels, comments and issue-body sections."""

__version__ = "0.1.0"