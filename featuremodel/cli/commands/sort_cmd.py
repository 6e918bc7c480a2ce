"""``featuremodel sort MVN_ID...`` — print module ids in order."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from featuremodel.errors import FeatureModelError
from featuremodel.models.artifact_id import ArtifactId

console = Console(emoji=False)


def sort_cmd(
    mvn_ids: list[str] = typer.Argument(..., help="Module ids to sort."),
) -> None:
    """Print the given ids sorted by group, artifact, version, type, classifier."""
    try:
        ids = sorted(ArtifactId.from_mvn_id(m) for m in mvn_ids)
    except FeatureModelError as e:
        console.print(f"[bold red]Invalid id:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    for artifact_id in ids:
        console.print(artifact_id.to_mvn_id(), highlight=False, markup=False)
