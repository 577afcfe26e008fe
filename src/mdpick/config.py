"""Configuration for mdpick.

Settings are layered, lowest precedence first:
1. Built-in defaults
2. YAML file: $MDPICK_CONFIG or ~/.config/mdpick/config.yaml
3. Environment: MDPICK_OUTPUT, MDPICK_EXTENSIONS (comma separated)
4. Command-line flags

Example config.yaml:

    output: selected.txt
    extensions: [.md, .markdown]
    theme:
      cursor_style: bold magenta
      checked_box: "[*]"
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from .scanner import DEFAULT_EXTENSIONS, normalize_extensions
from .tui.theme import DEFAULT_THEME, Theme, theme_from_mapping

logger = logging.getLogger(__name__)

CONFIG_ENV = "MDPICK_CONFIG"
OUTPUT_ENV = "MDPICK_OUTPUT"
EXTENSIONS_ENV = "MDPICK_EXTENSIONS"
DEFAULT_OUTPUT = "output.txt"


@dataclass
class Settings:
    """Resolved settings for one run."""

    directory: Path
    output_path: Path
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    theme: Theme = DEFAULT_THEME


def get_config_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Get the mdpick config directory."""
    env = os.environ if environ is None else environ
    xdg_config = env.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(xdg_config) / "mdpick"


def get_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Get the path to the config file (MDPICK_CONFIG wins)."""
    env = os.environ if environ is None else environ
    override = (env.get(CONFIG_ENV) or "").strip()
    if override:
        return Path(os.path.expanduser(override))
    return get_config_dir(env) / "config.yaml"


def load_config_file(path: Path) -> dict[str, Any]:
    """Load the YAML config file. Missing or broken files yield {}."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", path)
        return {}
    return data


def _split_extensions(value: Any) -> list[str]:
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, list):
        return [str(v) for v in value]
    logger.warning("Ignoring invalid extensions setting: %r", value)
    return []


def _resolve(path: str | Path, cwd: Path) -> Path:
    """Make ``path`` absolute against ``cwd`` without following symlinks."""
    return Path(os.path.normpath(os.path.join(cwd, os.path.expanduser(str(path)))))


def load_settings(
    directory: str | Path,
    cwd: Path,
    output: str | None = None,
    extensions: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Merge defaults, config file, environment and CLI values.

    ``cwd`` anchors relative paths, including the default output file.
    """
    env = os.environ if environ is None else environ
    cfg = load_config_file(get_config_path(env))

    output_value = DEFAULT_OUTPUT
    ext_values: list[str] = list(DEFAULT_EXTENSIONS)

    if isinstance(cfg.get("output"), str) and cfg["output"].strip():
        output_value = cfg["output"].strip()
    if "extensions" in cfg:
        ext_values = _split_extensions(cfg["extensions"]) or ext_values

    theme_cfg = cfg.get("theme")
    if theme_cfg is not None and not isinstance(theme_cfg, dict):
        logger.warning("Ignoring invalid theme setting: %r", theme_cfg)
        theme_cfg = None
    theme = theme_from_mapping(theme_cfg)

    env_output = (env.get(OUTPUT_ENV) or "").strip()
    if env_output:
        output_value = env_output
    env_exts = (env.get(EXTENSIONS_ENV) or "").strip()
    if env_exts:
        ext_values = _split_extensions(env_exts)

    if output:
        output_value = output
    if extensions:
        ext_values = list(extensions)

    return Settings(
        directory=_resolve(directory, cwd),
        output_path=_resolve(output_value, cwd),
        extensions=normalize_extensions(ext_values) or DEFAULT_EXTENSIONS,
        theme=theme,
    )
