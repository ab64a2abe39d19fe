"""CLI entry point for mdtoc.

Usage:
    python -m mdtoc render README.md                 # Render to HTML on stdout
    python -m mdtoc render README.md -o README.html  # Render to a file
    python -m mdtoc outline README.md                # Show the outline tree

Or via the installed command:
    mdtoc render doc.md --levels 1,2,3               # Include h1 to h3
    mdtoc render doc.md --list-type ol               # Numbered outline
    mdtoc outline doc.md                             # Preview outline nesting
    mdtoc --version                                  # Show version
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.tree import Tree

from mdtoc._version import get_full_version_string
from mdtoc.config import CONFIG_FILE_NAME, MdtocConfig, load_config
from mdtoc.toc import (
    RemovedOptionError,
    TocOptions,
    build_outline_tree,
    find_headlines,
    toc_plugin,
)
from mdtoc.toc.tree import OutlineNode

# Load environment variables
load_dotenv()

console = Console()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure logging from LOG_LEVEL (default WARNING)."""
    level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def parse_levels(value: str) -> tuple[int, ...]:
    """Parse a comma separated list of heading levels ("1,2,3")."""
    try:
        levels = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid heading levels: {value}") from None
    if not levels or any(level < 1 or level > 6 for level in levels):
        raise argparse.ArgumentTypeError(f"Heading levels must be between 1 and 6: {value}")
    return levels


def create_markdown(config: MdtocConfig) -> MarkdownIt:
    """Create a markdown-it instance with the table of contents plugin.

    Args:
        config: Loaded configuration

    Returns:
        Configured MarkdownIt instance
    """
    md = MarkdownIt(config.render.preset).use(toc_plugin, config.toc)
    if config.render.anchors:
        # Give every heading an id so outline links resolve
        md.use(anchors_plugin, min_level=1, max_level=6, slug_func=config.toc.slugify)
    return md


def build_rich_tree(root: OutlineNode, title: str) -> Tree:
    """Convert an outline tree to a rich Tree for display."""
    tree = Tree(f"[bold]{escape(title)}[/]")

    def add(parent: Tree, node: OutlineNode) -> None:
        for child in node.children:
            if child.is_synthetic:
                label = "[dim]…[/]"
            else:
                label = f"{escape(child.text or '')} [dim]#{escape(child.anchor or '')}[/]"
            add(parent.add(label), child)

    add(tree, root)
    return tree


def resolve_config(args: argparse.Namespace) -> MdtocConfig:
    """Load workspace config and apply command-line overrides."""
    workspace = args.workspace.resolve() if args.workspace else Path.cwd()
    config = load_config(workspace)

    overrides = {}
    if args.levels:
        overrides["include_levels"] = args.levels
    if getattr(args, "list_type", None):
        overrides["list_type"] = args.list_type
    config.toc = config.toc.with_overrides(**overrides)

    if getattr(args, "no_anchors", False):
        config.render.anchors = False
    return config


def run_render(source: Path, config: MdtocConfig, output: Path | None = None) -> int:
    """Render a markdown file to HTML with the outline inserted.

    Args:
        source: Markdown file to render
        config: Configuration to render with
        output: File to write to (defaults to stdout)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if not source.exists():
        console.print(f"[red]Error:[/] File not found: {source}")
        return 1

    md = create_markdown(config)
    try:
        html = md.render(source.read_text(encoding="utf-8"))
    except RemovedOptionError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    if output is None:
        sys.stdout.write(html)
    else:
        output.write_text(html, encoding="utf-8")
        console.print(f"[green]✓[/] Wrote {output}")
    return 0


def run_outline(source: Path, config: MdtocConfig) -> int:
    """Print the outline tree of a markdown file.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if not source.exists():
        console.print(f"[red]Error:[/] File not found: {source}")
        return 1

    md = create_markdown(config)
    tokens = md.parse(source.read_text(encoding="utf-8"))
    options: TocOptions = config.toc
    headlines = find_headlines(tokens, options.include_levels, options.slugify)
    logger.debug("Found %d headlines in %s", len(headlines), source)

    if not headlines:
        console.print("[yellow]![/] No headlines found for the included levels")
        return 0

    console.print(build_rich_tree(build_outline_tree(headlines), source.name))
    return 0


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        type=Path,
        help="Markdown file to process",
    )
    parser.add_argument(
        "--levels",
        "-l",
        type=parse_levels,
        default=None,
        help="Comma separated heading levels to include (default: 1,2)",
    )
    parser.add_argument(
        "--workspace",
        "-w",
        type=Path,
        default=None,
        help=f"Directory containing {CONFIG_FILE_NAME} (defaults to current directory)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="mdtoc",
        description="mdtoc - table of contents for markdown rendered with markdown-it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""\
Examples:
  mdtoc render doc.md                    Render doc.md to HTML on stdout
  mdtoc render doc.md -o doc.html        Write HTML to doc.html
  mdtoc render doc.md --levels 2,3       Only include h2 and h3
  mdtoc outline doc.md                   Show the outline tree

Place a [[toc]] line in the document where the outline should go.

Configuration:
  Create {CONFIG_FILE_NAME} in your workspace to customize output:
    [toc]
    include_levels = [1, 2, 3]
    list_type = "ol"
    container_class = "toc"

    [render]
    anchors = true
""",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    # Render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Render a markdown file to HTML with the outline inserted",
    )
    add_common_arguments(render_parser)
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write HTML to this file instead of stdout",
    )
    render_parser.add_argument(
        "--list-type",
        choices=["ul", "ol"],
        default=None,
        help="List element for the outline (default: ul)",
    )
    render_parser.add_argument(
        "--no-anchors",
        action="store_true",
        help="Don't add id attributes to headings",
    )

    # Outline subcommand
    outline_parser = subparsers.add_parser(
        "outline",
        help="Show the outline tree of a markdown file",
    )
    add_common_arguments(outline_parser)

    args = parser.parse_args(argv)

    if args.version:
        console.print(get_full_version_string(), highlight=False)
        return 0

    if args.command is None:
        parser.error("a command is required")

    configure_logging()

    try:
        config = resolve_config(args)
    except ValueError as e:
        console.print(f"[red]Error:[/] Invalid configuration: {e}")
        return 1

    if args.command == "outline":
        return run_outline(args.source, config)

    return run_render(args.source, config, output=args.output)


if __name__ == "__main__":
    sys.exit(main())
