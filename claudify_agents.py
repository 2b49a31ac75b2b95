"""Claudify command-line interface.

Converts OpenCode agents into Claude Code agents. Running without a
subcommand performs a full conversion.
"""

from __future__ import annotations

import argparse
import os
import sys

from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from claudify.config import ConverterConfig, load_config
from claudify.driver import convert, preview


console = Console()


def _configure_logging(debug: bool = False) -> None:
    """Configure loguru logging, honouring CLAUDIFY_LOG_LEVEL from .env."""
    load_dotenv()
    level = "DEBUG" if debug else os.environ.get("CLAUDIFY_LOG_LEVEL", "INFO").upper()
    logger.remove()
    logger.add(sys.stderr, level=level)


def _config_from_args(args: argparse.Namespace) -> ConverterConfig:
    return load_config(
        source_dir=args.source,
        output_dir=args.output,
        config_path=args.config,
    )


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle the `convert` command."""
    config = _config_from_args(args)
    try:
        convert(config)
        return 0
    except Exception:
        logger.exception("Conversion failed for source: {source}", source=config.source_dir)
        console.print(
            f"[red]Conversion failed for [cyan]{escape(str(config.source_dir))}[/cyan]. "
            "See logs for details.[/red]"
        )
        return 1


def cmd_preview(args: argparse.Namespace) -> int:
    """Handle the `preview` command."""
    config = _config_from_args(args)
    try:
        previews = preview(config)
    except Exception:
        logger.exception("Preview failed for source: {source}", source=config.source_dir)
        console.print("[red]Unable to read agents. See logs for details.[/red]")
        return 1

    if not previews:
        console.print(f"[yellow]No agents found under {escape(str(config.source_dir))}.[/yellow]")
        return 0

    table = Table(title="Claude Code Agents", show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Name")
    table.add_column("Model")
    table.add_column("Permission Mode")
    table.add_column("Tools")

    for item in previews:
        path = escape(item.relative_path.as_posix())
        if not item.convertible:
            table.add_row(path, "[yellow]skipped (no frontmatter)[/yellow]", "", "", "")
            continue
        fm = item.frontmatter
        tools = fm.get("tools", "")
        if isinstance(tools, list):
            tools = ", ".join(tools)
        table.add_row(
            path,
            escape(str(fm.get("name", ""))),
            fm["model"],
            fm["permissionMode"],
            escape(str(tools)),
        )

    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="claudify",
        description="Convert OpenCode agents into Claude Code agents and skills.",
    )
    parser.add_argument("--source", default=None, help="OpenCode agent directory.")
    parser.add_argument("--output", default=None, help="Directory for generated Claude files.")
    parser.add_argument("--config", default=None, help="Path to a YAML config file.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.set_defaults(func=cmd_convert)

    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Regenerate the Claude agents and skills tree (default).",
    )
    convert_parser.set_defaults(func=cmd_convert)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Show how each agent would be converted without writing files.",
    )
    preview_parser.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the Claudify CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
