"""Conversion driver for Claudify.

Runs the whole OpenCode → Claude Code conversion in two phases:

1. Clean: remove the previous ``agents/`` and ``skills/`` output trees.
2. Populate: convert every agent found under the source directory, then
   write the built-in ``context-scout`` agent and ``openagents-standards``
   skill.

Because output is always rebuilt from scratch, running the conversion twice
against the same sources yields identical trees. Anything edited by hand
inside the output directories is lost on the next run.

Filesystem errors are not caught here; they abort the run.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import ConverterConfig
from .frontmatter import parse_frontmatter
from .mapper import convert_frontmatter
from .serializer import generate_claude_markdown
from .templates import BUILTIN_DOCUMENTS, STANDARDS_SKILL_PATH
from .walker import find_markdown_files


console = Console()


@dataclass
class ConversionReport:
    """Paths touched by a single conversion run."""

    converted: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    builtins: List[Path] = field(default_factory=list)


@dataclass
class AgentPreview:
    """Read-only view of how one agent file would be converted."""

    relative_path: Path
    frontmatter: Optional[Dict[str, Any]]

    @property
    def convertible(self) -> bool:
        return self.frontmatter is not None


def _read_text(path: Path) -> str:
    # newline="" keeps bodies byte-identical, including any "\r".
    # Undecodable bytes become U+FFFD rather than aborting the run.
    with path.open(encoding="utf-8", errors="replace", newline="") as fh:
        return fh.read()


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)


def clean_output(config: ConverterConfig) -> None:
    """Delete previous output and recreate the empty output directories."""
    for directory in (config.agents_dir, config.skills_dir):
        if directory.is_symlink() or directory.is_file():
            logger.debug("Removing previous output at {path}", path=directory)
            directory.unlink()
        elif directory.exists():
            logger.debug("Removing previous output at {path}", path=directory)
            shutil.rmtree(directory)

    config.agents_dir.mkdir(parents=True, exist_ok=True)
    (config.output_dir / STANDARDS_SKILL_PATH).parent.mkdir(parents=True, exist_ok=True)


def output_path_for(agent_path: Path, config: ConverterConfig) -> Path:
    """Re-root an agent file from the source tree under ``agents/``."""
    return config.agents_dir / agent_path.relative_to(config.source_dir)


def process_agent(agent_path: Path, config: ConverterConfig) -> Optional[Path]:
    """Convert a single agent file.

    Returns the written path, or ``None`` when the file has no frontmatter
    and was skipped.
    """
    parsed = parse_frontmatter(_read_text(agent_path))
    if not parsed.has_frontmatter:
        logger.warning("Skipping {path}: no frontmatter", path=agent_path)
        console.print(f"[yellow]Skipping {escape(str(agent_path))} (no frontmatter)[/yellow]")
        return None

    claude_frontmatter = convert_frontmatter(parsed.metadata)
    markdown = generate_claude_markdown(claude_frontmatter, parsed.body)

    output_path = output_path_for(agent_path, config)
    _write_text(output_path, markdown)

    relative = agent_path.relative_to(config.source_dir)
    logger.info("Converted agent {relative} -> {output}", relative=relative, output=output_path)
    console.print(f"[green]Converted:[/green] {escape(relative.as_posix())}")
    return output_path


def write_builtin_documents(config: ConverterConfig) -> List[Path]:
    """Write the fixed helper agent and standards skill into the output tree."""
    written: List[Path] = []
    for relative, content in BUILTIN_DOCUMENTS.items():
        path = config.output_dir / relative
        _write_text(path, content)
        logger.info("Wrote built-in document {path}", path=path)
        written.append(path)
    return written


def convert(config: ConverterConfig) -> ConversionReport:
    """Run a full conversion and return what was written or skipped."""
    console.print("[bold green]OpenAgents → Claude Code Converter[/bold green]")
    console.print(f"   Source: [cyan]{escape(str(config.source_dir))}[/cyan]")
    console.print(f"   Output: [cyan]{escape(str(config.output_dir))}[/cyan]\n")

    clean_output(config)

    console.print("[bold]Converting agents...[/bold]\n")
    report = ConversionReport()
    for agent_path in find_markdown_files(config.source_dir):
        written = process_agent(agent_path, config)
        if written is None:
            report.skipped.append(agent_path)
        else:
            report.converted.append(written)

    report.builtins = write_builtin_documents(config)

    logger.info(
        "Conversion finished: {converted} converted, {skipped} skipped",
        converted=len(report.converted),
        skipped=len(report.skipped),
    )
    console.print("\n[bold green]Conversion complete![/bold green]")
    console.print(f"   Output: [cyan]{escape(str(config.output_dir))}[/cyan]")
    return report


def preview(config: ConverterConfig) -> List[AgentPreview]:
    """Parse and map every agent without writing anything."""
    previews: List[AgentPreview] = []
    for agent_path in find_markdown_files(config.source_dir):
        parsed = parse_frontmatter(_read_text(agent_path))
        frontmatter = (
            convert_frontmatter(parsed.metadata) if parsed.has_frontmatter else None
        )
        previews.append(
            AgentPreview(
                relative_path=agent_path.relative_to(config.source_dir),
                frontmatter=frontmatter,
            )
        )
    return previews
