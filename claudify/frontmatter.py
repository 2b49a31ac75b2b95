"""Frontmatter parser for OpenCode agent files.

OpenCode agents start with a small ``---`` delimited header written in a
line-oriented ``key: value`` dialect. This is deliberately *not* YAML:
values are split at the first colon, inline ``[a, b]`` lists are the only
structured form, and scalar quotes are kept as written.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

FrontmatterValue = Union[str, List[str]]

# Header must open the file; only "\n" line endings are recognised.
_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)


@dataclass
class ParsedDocument:
    """A source document split into its header mapping and body."""

    metadata: Optional[Dict[str, FrontmatterValue]]
    body: str

    @property
    def has_frontmatter(self) -> bool:
        return self.metadata is not None


def _parse_value(raw: str) -> FrontmatterValue:
    if raw.startswith("[") and raw.endswith("]"):
        return [item.strip().replace('"', "") for item in raw[1:-1].split(",")]
    return raw


def parse_frontmatter_lines(block: str) -> Dict[str, FrontmatterValue]:
    """Decode the lines between the two ``---`` delimiters.

    Lines without a colon are ignored and later keys overwrite earlier ones.
    """
    data: Dict[str, FrontmatterValue] = {}
    for line in block.split("\n"):
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        data[key.strip()] = _parse_value(value.strip())
    return data


def parse_frontmatter(content: str) -> ParsedDocument:
    """Split ``content`` into frontmatter metadata and body.

    Documents without a leading header come back with ``metadata=None`` and
    the untouched text as the body, so callers can decide to skip them.
    """
    match = _FRONTMATTER_RE.match(content)
    if match is None:
        return ParsedDocument(metadata=None, body=content)

    return ParsedDocument(
        metadata=parse_frontmatter_lines(match.group(1)),
        body=match.group(2),
    )
