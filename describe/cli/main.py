"""Main CLI command for describing staged changes."""

from typing import Optional

import typer
from dotenv import load_dotenv
from loguru import logger

from describe import __version__
from describe.config import ConfigError, RunConfig, resolve_config
from describe.git import BudgetExceededError, GitError, StagedChangeCollector, open_repository
from describe.global_config import GlobalConfigError, load_file_config
from describe.llm import LLMError, MissingAPIKeyError, describe_changes
from describe.cli.utils import configure_logging


def load_run_config(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    endpoint: Optional[str] = None,
    debug: Optional[bool] = None,
    max_lines: Optional[int] = None,
    timeout: Optional[float] = None,
) -> RunConfig:
    """Load the config file, the .env file and CLI overrides into a RunConfig.

    Raises:
        GlobalConfigError: If the config file is invalid.
        ConfigError: If the merged configuration is invalid.
    """
    # Load environment variables from .env file
    load_dotenv()
    file_config = load_file_config()
    return resolve_config(
        file_config,
        provider=provider,
        model=model,
        endpoint=endpoint,
        debug=debug,
        max_lines=max_lines,
        timeout=timeout,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"describe {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        help="API provider (openrouter or ollama)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="Model to use for description",
    ),
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        help="API endpoint URL",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
    ),
    max_lines: Optional[int] = typer.Option(
        None,
        "--max-lines",
        help="Maximum number of diff lines to send (0 or less disables the limit)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the summarization endpoint",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a commit message from the staged changes of the current repository."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    configure_logging(debug)

    try:
        config = load_run_config(
            provider=provider,
            model=model,
            endpoint=endpoint,
            debug=True if debug else None,
            max_lines=max_lines,
            timeout=timeout,
        )
    except (GlobalConfigError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # The config file may turn debug on
    configure_logging(config.debug)
    logger.debug("Debug mode enabled")
    logger.debug(f"Version: {__version__}")
    logger.debug(f"Model: {config.model}")

    try:
        logger.debug("Opening git repository")
        repository = open_repository()

        logger.debug("Getting staged changes")
        document = StagedChangeCollector().collect(repository, config.max_lines)
        if document.is_empty:
            logger.debug("No staged changes found")
            typer.echo("No staged changes found.")
            return

        changes = document.render()
        logger.debug(f"Found staged changes ({len(changes.encode('utf-8'))} bytes)")

        result = describe_changes(changes, config)
        logger.debug(
            f"Received description from API ({len(result.description)} chars, "
            f"{result.input_tokens} input / {result.output_tokens} output tokens)"
        )
        typer.echo(result.description)

    except BudgetExceededError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except KeyboardInterrupt:
        typer.echo("Interrupted.", err=True)
        raise typer.Exit(130)
