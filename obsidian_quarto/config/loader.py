"""YAML config loading; output paths may use ${VAR} and ~."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import QuartoConfig

CONFIG_FILENAME = "obsidian-quarto.yaml"


def load_config(cli_path: str | None = None) -> QuartoConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".obsidian-quarto" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                config = QuartoConfig(**raw)
                config.output.directory = _expand_path(config.output.directory)
                return config
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return QuartoConfig()


_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


def _expand_path(value: str) -> str:
    """Expand ${VAR} references, then a leading ~, in a configured path."""
    expanded = _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    return str(Path(expanded).expanduser())


# Default YAML template for `obsidian-quarto config init`
DEFAULT_CONFIG_TEMPLATE = """\
# obsidian-quarto.yaml

# Output
output:
  directory: "."               # where .qmd files go; ${VAR} and ~ are expanded
  overwrite: false             # replace existing files with the same name
  on_warnings: "warn"          # ignore | warn | fail

# Logging
log_level: "info"              # debug | info | warn | error
"""
