"""Tests for OpenCode → Claude field mapping."""

import pytest

from claudify.frontmatter import parse_frontmatter
from claudify.mapper import (
    DEFAULT_MODEL_ALIAS,
    MODEL_ALIASES,
    convert_frontmatter,
    map_model,
    tools_from_permissions,
)


def test_maps_subagent_with_known_model():
    source = {
        "id": "my-agent",
        "description": "does things",
        "mode": "subagent",
        "model": "opencode/grok",
    }

    assert convert_frontmatter(source) == {
        "name": "my-agent",
        "description": "does things",
        "model": "opus",
        "permissionMode": "plan",
    }


def test_target_field_order_is_fixed():
    source = {
        "mode": "subagent",
        "model": "haiku",
        "tools": "Read",
        "description": "d",
        "name": "n",
    }
    assert list(convert_frontmatter(source)) == [
        "name",
        "description",
        "tools",
        "model",
        "permissionMode",
    ]


def test_id_takes_precedence_over_name():
    assert convert_frontmatter({"id": "a", "name": "b"})["name"] == "a"


def test_empty_id_falls_back_to_name():
    assert convert_frontmatter({"id": "", "name": "b"})["name"] == "b"


def test_present_but_empty_name_is_kept():
    parsed = parse_frontmatter("---\nname:\ndescription: d\n---\nbody\n")
    assert convert_frontmatter(parsed.metadata)["name"] == ""


def test_empty_id_without_name_omits_name():
    assert "name" not in convert_frontmatter({"id": ""})


def test_empty_source_only_resolves_model_and_mode():
    assert convert_frontmatter({}) == {"model": "sonnet", "permissionMode": "default"}


def test_other_fields_are_dropped():
    result = convert_frontmatter({"name": "a", "temperature": "0.1", "hooks": "x"})
    assert set(result) == {"name", "model", "permissionMode"}


@pytest.mark.parametrize("mode", ["primary", "all", "Subagent", None])
def test_non_subagent_mode_uses_default_permission_mode(mode):
    source = {} if mode is None else {"mode": mode}
    assert convert_frontmatter(source)["permissionMode"] == "default"


def test_explicit_tools_copied_verbatim():
    assert convert_frontmatter({"tools": "Read, Bash"})["tools"] == "Read, Bash"
    assert convert_frontmatter({"tools": ["Read", "Glob"]})["tools"] == ["Read", "Glob"]


def test_explicit_tools_win_over_permissions():
    source = {"tools": "Read", "permissions": {"bash": True}}
    assert convert_frontmatter(source)["tools"] == "Read"


def test_tools_derived_from_permissions():
    source = {
        "permissions": {
            "read": True,
            "grep": True,
            "glob": False,
            "edit": True,
            "write": False,
            "bash": True,
        }
    }
    assert convert_frontmatter(source)["tools"] == "Read, Grep, Edit, Bash"


def test_permissions_with_nothing_enabled_gives_empty_tools():
    assert convert_frontmatter({"permissions": {"read": False}})["tools"] == ""


def test_scalar_permissions_value_is_treated_as_absent():
    assert "tools" not in convert_frontmatter({"permissions": ""})


def test_permission_flags_use_plain_truthiness():
    # Any non-empty string enables the tool, even "false".
    assert tools_from_permissions({"read": "false", "bash": True}) == "Read, Bash"
    assert tools_from_permissions({"read": "", "grep": 0, "edit": None, "write": 1}) == "Write"


@pytest.mark.parametrize("model, alias", sorted(MODEL_ALIASES.items()))
def test_known_models_map_to_aliases(model, alias):
    assert map_model(model) == alias


@pytest.mark.parametrize("model", [None, "", "claude-3-opus", "OPENCODE/GROK", ["haiku"]])
def test_unknown_models_use_default_alias(model):
    assert map_model(model) == DEFAULT_MODEL_ALIAS


def test_missing_model_defaults_to_sonnet():
    assert convert_frontmatter({"id": "x"})["model"] == "sonnet"


def test_alias_table_is_read_only():
    with pytest.raises(TypeError):
        MODEL_ALIASES["gpt-5"] = "opus"  # type: ignore[index]
