"""HTML listing of a user's pending notifications."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Notification:
    """A pending notification for a user."""

    origin_url: str
    short_description: str | None = None
    metadata: str | None = None


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def render(user: str, notifications: Iterable[Notification]) -> str:
    """Render the notifications of ``user`` as an HTML page."""
    notifications = list(notifications)
    parts = [
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        "<title>Triagebot Notification Data</title>",
        "</head>",
        "<body>",
        f"<h3>Pending notifications for {user}</h3>",
    ]

    if not notifications:
        parts.append("<p><em>You have no pending notifications! :)</em></p>")
    else:
        parts.append("<ol>")
        for notification in notifications:
            description = notification.short_description or notification.origin_url
            if notification.short_description is not None:
                description = notification.short_description
            parts.append("<li>")
            parts.append(
                f"<a href='{notification.origin_url}'>{_escape(description)}</a>"
            )
            if notification.metadata is not None:
                parts.append(f"<ul><li>{_escape(notification.metadata)}</li></ul>")
            parts.append("</li>")
        parts.append("</ol>")
        parts.append(
            "<p><em>You can acknowledge a notification by sending </em>"
            "<code>ack &lt;idx&gt;</code><em> to </em><strong><code>@triagebot"
            "</code></strong><em> on Zulip, or you can acknowledge all "
            "notifications by sending </em><code>ack all</code><em>. Read about "
            "the other notification commands in the triagebot documentation."
            "</em></p>"
        )

    parts.append("</body>")
    parts.append("</html>")
    return "".join(parts)