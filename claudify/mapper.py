"""Field mapping from OpenCode agent frontmatter to Claude Code frontmatter.

Only five Claude fields are ever produced, in this order:
``name``, ``description``, ``tools``, ``model`` and ``permissionMode``.
Everything else in the source header is dropped.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Final, Mapping

DEFAULT_MODEL_ALIAS: Final[str] = "sonnet"
DEFAULT_PERMISSION_MODE: Final[str] = "default"
SUBAGENT_PERMISSION_MODE: Final[str] = "plan"

MODEL_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "opencode/grok-code": "sonnet",
        "opencode/grok": "opus",
        "gpt-4": "sonnet",
        "gpt-4o": "sonnet",
        "haiku": "haiku",
    }
)

# (permission flag, Claude tool name), in emission order.
PERMISSION_TOOLS: Final[tuple[tuple[str, str], ...]] = (
    ("read", "Read"),
    ("grep", "Grep"),
    ("glob", "Glob"),
    ("edit", "Edit"),
    ("write", "Write"),
    ("bash", "Bash"),
)


def map_model(model: Any) -> str:
    """Translate an OpenCode model identifier into a Claude model alias."""
    if isinstance(model, str):
        return MODEL_ALIASES.get(model, DEFAULT_MODEL_ALIAS)
    return DEFAULT_MODEL_ALIAS


def tools_from_permissions(permissions: Mapping[str, Any]) -> str:
    """Build a Claude ``tools`` string from an OpenCode permissions block."""
    tools = [tool for flag, tool in PERMISSION_TOOLS if permissions.get(flag)]
    return ", ".join(tools)


def convert_frontmatter(source: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert OpenCode frontmatter into Claude Code frontmatter.

    Never raises on missing fields: ``name``, ``description`` and ``tools``
    are simply left out, while ``model`` and ``permissionMode`` always
    resolve to a value.
    """
    claude: Dict[str, Any] = {}

    name = source.get("id") or source.get("name")
    if name is not None:
        claude["name"] = name

    if source.get("description") is not None:
        claude["description"] = source["description"]

    permissions = source.get("permissions")
    if source.get("tools"):
        claude["tools"] = source["tools"]
    elif isinstance(permissions, Mapping):
        claude["tools"] = tools_from_permissions(permissions)

    claude["model"] = map_model(source.get("model"))

    if source.get("mode") == "subagent":
        claude["permissionMode"] = SUBAGENT_PERMISSION_MODE
    else:
        claude["permissionMode"] = DEFAULT_PERMISSION_MODE

    return claude
