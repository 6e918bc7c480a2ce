"""featuremodel CLI — Typer-based command-line interface.

Provides the ``featuremodel`` command with subcommands for inspecting
artifacts, prototypes and id ordering.

All output uses Rich for formatted terminal display.
"""
