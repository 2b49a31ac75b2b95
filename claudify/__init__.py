"""Top-level package for Claudify.

Claudify converts OpenCode agent definitions (``.opencode/agent/**/*.md``)
into Claude Code agents, and adds a ``context-scout`` helper agent plus an
``openagents-standards`` skill to the generated tree.

Data flow per agent file:
- parse the ``---`` frontmatter header (``frontmatter``)
- map OpenCode fields onto Claude fields (``mapper``)
- re-emit the Claude markdown document (``serializer``)
"""

from __future__ import annotations

from .config import ConverterConfig, load_config
from .driver import AgentPreview, ConversionReport, convert, preview
from .frontmatter import ParsedDocument, parse_frontmatter
from .mapper import convert_frontmatter, map_model
from .serializer import generate_claude_markdown


__version__ = "0.1.0"

__all__ = [
    "AgentPreview",
    "ConversionReport",
    "ConverterConfig",
    "ParsedDocument",
    "convert",
    "convert_frontmatter",
    "generate_claude_markdown",
    "load_config",
    "map_model",
    "parse_frontmatter",
    "preview",
]
