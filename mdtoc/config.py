"""mdtoc configuration management.

Loads configuration from .mdtoc.toml if present, with sensible defaults.
Configuration hierarchy (highest priority first):
1. Command-line flags
2. Workspace config (.mdtoc.toml)
3. Defaults
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from mdtoc.toc.options import TocOptions

CONFIG_FILE_NAME = ".mdtoc.toml"


@dataclass
class RenderConfig:
    """Configuration for the markdown-it instance used by the CLI."""

    preset: str = "commonmark"
    # Add ids to headings so that outline links resolve
    anchors: bool = True


@dataclass
class MdtocConfig:
    """mdtoc configuration."""

    toc: TocOptions = field(default_factory=TocOptions)
    render: RenderConfig = field(default_factory=RenderConfig)


def load_config(workspace: Path) -> MdtocConfig:
    """Load configuration from .mdtoc.toml if it exists.

    Args:
        workspace: Directory to look for the config file in.

    Returns:
        MdtocConfig with values from config file or defaults.
    """
    config_path = workspace / CONFIG_FILE_NAME

    if not config_path.exists():
        return MdtocConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    toc_data = data.get("toc", {})
    render_data = data.get("render", {})

    render = RenderConfig(
        preset=render_data.get("preset", "commonmark"),
        anchors=render_data.get("anchors", True),
    )

    return MdtocConfig(toc=TocOptions.from_dict(toc_data), render=render)
