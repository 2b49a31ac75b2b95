"""Configuration for the Claudify converter.

Source and output directories are resolved from, in priority order:
explicit arguments, ``CLAUDIFY_SOURCE_DIR`` / ``CLAUDIFY_OUTPUT_DIR``
environment variables (a ``.env`` file is honoured by the CLI), the YAML
config file (``CLAUDIFY_CONFIG``, default ``config/claudify.yaml``), and
finally the defaults below, relative to the project root.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

DEFAULT_SOURCE_DIR = Path(".opencode") / "agent"
DEFAULT_OUTPUT_DIR = Path("generated")
DEFAULT_CONFIG_PATH = Path("config") / "claudify.yaml"

AGENTS_SUBDIR = "agents"
SKILLS_SUBDIR = "skills"


@dataclass(frozen=True)
class ConverterConfig:
    """Resolved locations for a conversion run."""

    source_dir: Path
    output_dir: Path

    @property
    def agents_dir(self) -> Path:
        return self.output_dir / AGENTS_SUBDIR

    @property
    def skills_dir(self) -> Path:
        return self.output_dir / SKILLS_SUBDIR


def _load_config_file(config_path: Path) -> Dict[str, Any]:
    """Read the optional YAML config file, returning {} when unusable."""
    if not config_path.exists():
        return {}

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except Exception:
        logger.exception("Failed to read converter config at {path}", path=config_path)
        return {}

    if not isinstance(data, dict):
        logger.error("Converter config at {path} is not a mapping.", path=config_path)
        return {}

    return data


def _resolve(project_root: Path, value: str | os.PathLike[str]) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = project_root / path
    return path


def load_config(
    source_dir: str | os.PathLike[str] | None = None,
    output_dir: str | os.PathLike[str] | None = None,
    config_path: str | os.PathLike[str] | None = None,
    project_root: Path | None = None,
) -> ConverterConfig:
    """Build a ConverterConfig from arguments, environment and config file."""
    root = (project_root or Path.cwd()).resolve()

    cfg_file = config_path or os.environ.get("CLAUDIFY_CONFIG") or DEFAULT_CONFIG_PATH
    file_data = _load_config_file(_resolve(root, cfg_file))

    source = (
        source_dir
        or os.environ.get("CLAUDIFY_SOURCE_DIR")
        or file_data.get("source_dir")
        or DEFAULT_SOURCE_DIR
    )
    output = (
        output_dir
        or os.environ.get("CLAUDIFY_OUTPUT_DIR")
        or file_data.get("output_dir")
        or DEFAULT_OUTPUT_DIR
    )

    config = ConverterConfig(
        source_dir=_resolve(root, str(source)),
        output_dir=_resolve(root, str(output)),
    )
    logger.debug(
        "Resolved converter config: source={source} output={output}",
        source=config.source_dir,
        output=config.output_dir,
    )
    return config
