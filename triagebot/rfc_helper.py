"""Adding a link to the rendered text of a new RFC pull request."""

from __future__ import annotations

from collections.abc import Iterable


def rendered_link_body(
    body: str, head_repo: str, head_ref: str, filenames: Iterable[str]
) -> str | None:
    """The new body with a ``[Rendered]`` link, or None if no edit is needed."""
    text_file = next((name for name in filenames if name.startswith("text/")), None)
    if text_file is None or "[Rendered]" in body:
        return None
    url = f"https://github.com/{head_repo}/blob/{head_ref}/{text_file}"
    return f"{body}\n\n[Rendered]({url})"