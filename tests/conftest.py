from __future__ import annotations

from pathlib import Path

import pytest

from claudify.config import ConverterConfig


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep developer CLAUDIFY_* settings and config files out of tests."""
    for name in ("CLAUDIFY_SOURCE_DIR", "CLAUDIFY_OUTPUT_DIR", "CLAUDIFY_CONFIG", "CLAUDIFY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def source_tree(tmp_path) -> Path:
    """An OpenCode agent directory with a mix of convertible and invalid files."""
    source = tmp_path / ".opencode" / "agent"
    (source / "core").mkdir(parents=True)
    (source / "development").mkdir()

    (source / "core" / "openagent.md").write_text(
        "---\n"
        "id: openagent\n"
        "description: Universal agent\n"
        "mode: primary\n"
        "model: gpt-4o\n"
        "---\n"
        "# OpenAgent\n\nDo the work.\n",
        encoding="utf-8",
    )
    (source / "development" / "reviewer.md").write_text(
        "---\n"
        "name: reviewer\n"
        "description: Reviews code\n"
        "mode: subagent\n"
        "model: opencode/grok\n"
        "tools: [Read, Grep, \"Glob\"]\n"
        "---\n"
        "Review carefully.\n",
        encoding="utf-8",
    )
    (source / "README.md").write_text("# Agents\n\nNo frontmatter here.\n", encoding="utf-8")
    (source / "notes.txt").write_text("---\nid: ignored\n---\n", encoding="utf-8")
    return source


@pytest.fixture
def config(tmp_path, source_tree) -> ConverterConfig:
    return ConverterConfig(source_dir=source_tree, output_dir=tmp_path / "generated")
