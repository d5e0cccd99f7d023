"""CLI entry point for describe.

This module provides the main CLI application that combines the default
describe command and its subcommands into a single interface.
"""

import typer

from describe.cli.config import config_app
from describe.cli.main import main_command

# Main application
app = typer.Typer(
    name="describe",
    help="describe: AI-generated commit messages for staged git changes",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
