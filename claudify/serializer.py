"""Claude Code markdown serializer."""

from __future__ import annotations

from typing import Any, Mapping


def _format_entry(key: str, value: Any) -> str:
    if isinstance(value, (list, tuple)):
        items = ", ".join(f'"{item}"' for item in value)
        return f"{key}: [{items}]"
    return f'{key}: "{value}"'


def generate_claude_markdown(frontmatter: Mapping[str, Any], body: str) -> str:
    """Render frontmatter and body as a Claude Code agent document.

    Values are quoted but not escaped; embedded quotes or newlines are
    written as-is.
    """
    header = "\n".join(_format_entry(key, value) for key, value in frontmatter.items())
    return f"---\n{header}\n---\n\n{body}"
