"""Main Typer application — imports and registers all CLI commands.

Entry point: ``featuremodel`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from featuremodel import __version__
from featuremodel.cli.commands.artifact_cmd import artifact_cmd
from featuremodel.cli.commands.prototype_cmd import prototype_cmd
from featuremodel.cli.commands.sort_cmd import sort_cmd
from featuremodel.config import settings

app = typer.Typer(
    name="featuremodel",
    help="Inspect artifacts and prototypes of the feature model.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="artifact", help="Show an artifact with its aliases and start order.")(artifact_cmd)
app.command(name="prototype", help="Show a prototype and its removals.")(prototype_cmd)
app.command(name="sort", help="Print module ids in their total order.")(sort_cmd)


def configure_logging(level: str) -> None:
    """Route log records through Rich at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True, emoji=False), show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Log level (defaults to FEATUREMODEL_LOG_LEVEL).",
    ),
) -> None:
    """Feature model inspection tools."""
    configure_logging(log_level or settings.effective_log_level)


@app.command(name="version", help="Print the featuremodel version.")
def version_cmd() -> None:
    """Print the package version."""
    Console(emoji=False).print(f"featuremodel {__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
