"""``featuremodel artifact MVN_ID`` — show an artifact.

Builds an artifact from a module id and ``--meta key=value`` pairs, then
prints its id, mvn url, start order, aliases and raw metadata.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from featuremodel.errors import FeatureModelError
from featuremodel.models.artifact import Artifact
from featuremodel.models.artifact_id import ArtifactId

console = Console(emoji=False)


def parse_pairs(pairs: list[str], option: str) -> list[tuple[str, str]]:
    """Split ``key=value`` command line values."""
    parsed: list[tuple[str, str]] = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {pair!r}", param_hint=option)
        parsed.append((key.strip(), value.strip()))
    return parsed


def artifact_cmd(
    mvn_id: str = typer.Argument(
        ...,
        help="Module id, groupId:artifactId[:type[:classifier]]:version.",
    ),
    meta: list[str] = typer.Option(
        None,
        "--meta",
        "-m",
        help="Metadata entry as key=value (repeatable).",
    ),
) -> None:
    """Show an artifact with its derived aliases and start order."""
    pairs = parse_pairs(meta or [], "--meta")
    try:
        artifact = Artifact(ArtifactId.from_mvn_id(mvn_id))
        artifact.metadata.update(pairs)
        start_order = artifact.get_start_order()
        aliases = sorted(artifact.get_aliases(include_main=False))
    except FeatureModelError as e:
        console.print(f"[bold red]Invalid artifact:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    table = Table(title=escape(str(artifact)), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("id", escape(artifact.id.to_mvn_id()))
    table.add_row("url", escape(artifact.id.to_mvn_url()))
    table.add_row("start order", str(start_order))
    table.add_row("aliases", escape("\n".join(a.to_mvn_id() for a in aliases)) or "[dim]none[/dim]")
    for key, value in sorted(artifact.metadata.items()):
        table.add_row(escape(f"metadata[{key}]"), escape(value))

    console.print(table)
