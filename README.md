# triagebot

This package holds the decision logic of an issue and pull request triage
bot. Every function takes plain data, such as label names, diffs, issue
bodies or JSON dictionaries. It returns what the bot should do: labels to add
or remove, comment text, a chosen reviewer, or a new issue body. The package
depends only on the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `triagebot.payload`: `assert_signed(signature, payload, secret)` checks the
  `sha1=<hex>` HMAC signature that comes with a webhook delivery. It raises
  `SignedPayloadError` if the signature is missing, malformed or wrong.
- `triagebot.interactions`: `EditIssueBody(body, section)` manages a
  bot-owned section inside an issue body. `apply(text, data)` returns the new
  body with the section's text and its embedded JSON data set.
  `current_data()` reads back the stored data, or returns `None` when the
  section is absent. The module also has `normalize_body`,
  `error_comment_body` and `ping_comment_body`.
- `triagebot.team`: the `Team` enum (`LIBS`, `COMPILER`, `LANG`), its
  `label()` method (for example `T-libs`), and `parse_team`, which raises
  `ValueError` for unknown names.
- `triagebot.notification_listing`: `render(user, notifications)` builds
  the HTML page that lists a user's pending `Notification`s. Descriptions and
  metadata are escaped.
- `triagebot.reviewers`: `candidate_reviewers_from_names` expands user names,
  ad-hoc groups from an `AssignConfig`, and teams (a mapping from team name to
  member logins) into a set of candidates. It leaves out the author and the
  current assignees of the `IssueRef`. `find_reviewer_from_names` picks one of
  them at random. When no candidate is found it raises `TeamNotFound`,
  `NoReviewer` or `AllReviewersFiltered`, all subclasses of
  `FindReviewerError`. `is_self_assign` compares names without regard to case.
- `triagebot.assign`: `find_reviewers_from_diff(config, diff)` matches each
  changed file against the gitignore-style `owners` patterns. The longest
  matching pattern wins for each file, and the owners of the patterns with the
  most changed lines are returned, sorted. It raises `ValueError` for an
  invalid pattern. The module also has `modifies_submodule`,
  `non_default_branch`, `welcome_message` and `warnings_comment`.
- `triagebot.relabel`: `match_pattern(pattern, label)` matches a label
  against a glob. A leading `!` turns a match into a deny.
  `check_filter(label, allow_unauthenticated, membership)` decides whether a
  user with a given `TeamMembership` may change a label. Invalid globs raise
  `PatternError`.
- `triagebot.note`: `NoteData` holds the "Summary Notes" section. It has
  `add_summary`, `remove_by_title`, `get_url_from_title`, `to_markdown` and
  `to_dict`, and `load_note_data` reads it back from JSON.
- `triagebot.notify_zulip`: decides which Zulip notifications a label
  change, close or reopen triggers (`label_change_notification`,
  `close_reopen_notifications`, `has_all_required_labels`). It also fills in
  topic and message templates (`format_topic`, which keeps topics within 60
  characters, `format_message` and `message_for`).
- `triagebot.shortcut`: `status_label_changes(shortcut, current_labels)`
  returns the status labels to remove and to add for a `Shortcut`.
- `triagebot.mentions`: `paths_to_mention` and `mention_message` build the
  comment that pings the people configured for touched paths.
- `triagebot.no_merges`: `merge_commits` finds the commits that have more
  than one parent. `NoMergesState.build_message` returns the warning for the
  merge commits that were not mentioned before.
- `triagebot.rustc_commits`: `parse_bors_comment` extracts the embedded
  `BorsMessage`, and `pr_number_from_commit_message` reads
  `Auto merge of #N ...`.
- `triagebot.milestone_prs`: `is_plausible_version`.
- `triagebot.rfc_helper`: `rendered_link_body` adds a `[Rendered]` link to
  the body of a new RFC pull request.
- `triagebot.docs_update`: `is_update_week`, `generate_pr_body` (which takes
  a list of `RecentCommit`s) and `combined_pr_body`.
- `triagebot.triage`: `need_triage` (returns `red`, `yellow` or `green`),
  `days_since_update` and `label_flags`.
- `triagebot.rfcbot`: dataclasses for final comment periods. `parse_full_fcp`
  builds a `FullFCP` from JSON, and `index_fcps` keys the results by
  `repository:number:title`.

## Examples

```python
from triagebot.relabel import check_filter, TeamMembership

rules = ["T-*", "I-*", "!I-*nominated"]
check_filter("I-nominated", rules, TeamMembership.OUTSIDER)
# CheckFilterResult.DENY
```

```python
from triagebot.reviewers import AssignConfig, IssueRef, candidate_reviewers_from_names

config = AssignConfig(adhoc_groups={"compiler": ["user1", "user2"]})
issue = IssueRef(author="user2", organization="rust-lang")
candidate_reviewers_from_names({}, config, issue, ["compiler"])
# {'user1'}
```

```python
from triagebot.payload import assert_signed, SignedPayloadError

try:
    assert_signed(signature_header, body_bytes, secret="secret")
except SignedPayloadError:
    ...  # reject the request
```

## What this package does not do

This package is a library of pure functions. It has no command, no HTTP
server to receive webhooks, and no dispatcher that maps event names to
handlers. It does not include a client for the GitHub or Zulip APIs and has
no database to store notifications or handler state. The caller fetches the
data, passes it in, and carries out the comments, label changes and messages
that come back.