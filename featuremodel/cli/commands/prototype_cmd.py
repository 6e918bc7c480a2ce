"""``featuremodel prototype`` — show a prototype and its removals.

The base feature is given by exactly one of ``--id`` or ``--url``; each
``--remove-*`` option appends to the matching removal list in order.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from featuremodel.cli.commands.artifact_cmd import parse_pairs
from featuremodel.errors import FeatureModelError
from featuremodel.models.artifact_id import ArtifactId
from featuremodel.models.prototype import Prototype

console = Console(emoji=False)


def prototype_cmd(
    mvn_id: str = typer.Option(None, "--id", help="Module id of the base feature."),
    url: str = typer.Option(None, "--url", help="Location of the base feature."),
    remove_config: list[str] = typer.Option(
        None, "--remove-config", help="Configuration pid to remove (repeatable)."
    ),
    remove_bundle: list[str] = typer.Option(
        None, "--remove-bundle", help="Bundle id to remove (repeatable)."
    ),
    remove_framework_property: list[str] = typer.Option(
        None, "--remove-framework-property", help="Framework property to remove (repeatable)."
    ),
    remove_extension: list[str] = typer.Option(
        None, "--remove-extension", help="Extension to remove entirely (repeatable)."
    ),
    remove_extension_artifact: list[str] = typer.Option(
        None,
        "--remove-extension-artifact",
        help="Artifact to remove from an extension, as extension=mvn-id (repeatable).",
    ),
) -> None:
    """Show a prototype with its removal lists."""
    if (mvn_id is None) == (url is None):
        console.print("[bold red]Give exactly one of --id or --url.[/bold red]")
        raise typer.Exit(code=2)

    extension_artifacts = parse_pairs(remove_extension_artifact or [], "--remove-extension-artifact")
    try:
        prototype = (
            Prototype.with_id(ArtifactId.from_mvn_id(mvn_id))
            if mvn_id is not None
            else Prototype.with_url(url)
        )
        prototype.configuration_removals.extend(remove_config or [])
        prototype.bundle_removals.extend(
            ArtifactId.from_mvn_id(b) for b in remove_bundle or []
        )
        prototype.framework_properties_removals.extend(remove_framework_property or [])
        prototype.extension_removals.extend(remove_extension or [])
        for extension, artifact in extension_artifacts:
            prototype.artifact_extension_removals_for(extension).append(
                ArtifactId.from_mvn_id(artifact)
            )
    except FeatureModelError as e:
        console.print(f"[bold red]Invalid prototype:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    def joined(values) -> str:
        return escape(", ".join(map(str, values))) or "-"

    lines = [
        f"[bold]Base (id):[/bold]   {joined([prototype.id] if prototype.id is not None else [])}",
        f"[bold]Base (url):[/bold]  {joined([prototype.url] if prototype.url is not None else [])}",
        "",
        f"[bold]Configurations:[/bold]       {joined(prototype.configuration_removals)}",
        f"[bold]Bundles:[/bold]              {joined(prototype.bundle_removals)}",
        f"[bold]Framework properties:[/bold] {joined(prototype.framework_properties_removals)}",
        f"[bold]Extensions:[/bold]           {joined(prototype.extension_removals)}",
    ]
    for extension, ids in prototype.artifact_extension_removals.items():
        lines.append(f"[bold]Extension {escape(extension)}:[/bold] {joined(ids)}")
    if not prototype.has_removals:
        lines.extend(["", "[dim]No removals.[/dim]"])

    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold]{escape(str(prototype))}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )
    )
