"""Built-in documents written alongside every conversion.

These are not derived from any OpenCode agent: a ``context-scout`` subagent
that finds OpenAgents context files, and an ``openagents-standards`` skill
that tells Claude to call it before doing anything else.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Final, Mapping

CONTEXT_SCOUT_PATH: Final[PurePosixPath] = PurePosixPath("agents/context-scout.md")
STANDARDS_SKILL_PATH: Final[PurePosixPath] = PurePosixPath(
    "skills/openagents-standards/SKILL.md"
)

CONTEXT_SCOUT_AGENT: Final[str] = """---
name: context-scout
description: Discovers and recommends OpenAgents context files using glob, read, and grep tools. Use when you need to find OpenAgents standards, guides, or domain knowledge in the .opencode/context directory.
tools: Read, Grep, Glob
model: haiku
permissionMode: plan
---

# ContextScout

You discover and recommend relevant OpenAgents context files from `.opencode/context/` based on the user's request.

## Your Process

1. Use `Glob` to find files in `.opencode/context/`.
2. Use `Read` or `Grep` to verify relevance.
3. Return file paths with brief descriptions.
"""

STANDARDS_SKILL: Final[str] = """---
name: openagents-standards
description: Automatically triggers before any task to ensure OpenAgents standards and context are loaded. Use when the user asks to create, modify, or analyze anything in this repository.
---

# OpenAgents Standards Loader

Before proceeding with the user's request:

1. Call the `context-scout` subagent with the user's request to find relevant OpenAgents context files.
2. Read the returned "Critical" and "High" priority files.
3. Apply the OpenAgents standards found to your work.
"""

BUILTIN_DOCUMENTS: Final[Mapping[PurePosixPath, str]] = MappingProxyType(
    {
        CONTEXT_SCOUT_PATH: CONTEXT_SCOUT_AGENT,
        STANDARDS_SKILL_PATH: STANDARDS_SKILL,
    }
)
