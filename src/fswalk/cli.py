"""Directory walking CLI.

Lists the files and directories below a root, with gitignore-style ignore
and match patterns, an optional depth bound and workspace-relative output.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer

from fswalk.models.entry import WalkEntry
from fswalk.models.enums import WalkKind
from fswalk.services.factory import create_walk_options, walk_entries

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=lambda name: structlog.PrintLogger(file=sys.stderr),
    wrapper_class=structlog.BoundLogger,
    context_class=dict,
    cache_logger_on_first_use=False,
)

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="fswalk",
    help="""Walk a directory tree lazily with ignore/match patterns.

Examples:

  # List everything below ./src
  uv run fswalk walk ./src/

  # Files only, skipping build output and logs
  uv run fswalk walk . --kind file -i "build/" -i "*.{log,tmp}"

  # Two levels deep, paths relative to a workspace, as JSON lines
  uv run fswalk walk ./src --depth 2 --workspace . --json""",
    rich_markup_mode="markdown",
)


def _format_entry(entry: WalkEntry, as_json: bool) -> str:
    if as_json:
        return json.dumps(entry.to_record(), ensure_ascii=False)
    if entry.is_directory:
        return f"{entry.relativepath}/" if entry.relativepath else "./"
    return entry.relativepath


@app.command()
def walk(
    root: str = typer.Argument(
        ...,
        help="Directory to walk",
    ),
    kind: WalkKind = typer.Option(
        WalkKind.ANY,
        "--kind",
        "-k",
        help="Entry kinds to list",
    ),
    ignore: Optional[list[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Gitignore-style pattern to exclude (repeatable, supports *.{a,b})",
    ),
    match: Optional[list[str]] = typer.Option(
        None,
        "--match",
        "-m",
        help="Gitignore-style pattern entries must match (repeatable, supports *.{a,b})",
    ),
    workspace: Optional[str] = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Base directory for patterns and workspace paths (default: ROOT)",
    ),
    depth: Optional[int] = typer.Option(
        None,
        "--depth",
        "-d",
        min=0,
        help="Maximum number of directory levels to list",
    ),
    include_self: bool = typer.Option(
        False,
        "--self",
        help="Evaluate ROOT itself first; stop if it is filtered out",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print one JSON object per entry",
    ),
    log: bool = typer.Option(
        False,
        "--log",
        help="Log walk start and completion to stderr",
    ),
) -> None:
    """List entries below ROOT."""
    root_path = Path(root)

    if not root_path.exists():
        logger.error("directory_not_found", directory=str(root_path))
        raise typer.Exit(1)

    options = create_walk_options(
        ignore_patterns=ignore,
        match_patterns=match,
        workspace=Path(workspace) if workspace else None,
        depth=depth,
        include_self=include_self,
        log=log,
    )

    for entry in walk_entries(root_path, options, kind):
        typer.echo(_format_entry(entry, as_json))


@app.command()
def version() -> None:
    """Show version information."""
    from fswalk import __version__

    typer.echo(f"fswalk {__version__}")
