"""CLI commands for configuration management."""

import typer
from dotenv import load_dotenv

from describe import global_config
from describe.config import (
    API_KEY_ENV_VARS,
    DEFAULT_ENDPOINTS,
    DEFAULT_MODELS,
    ConfigError,
    LLMProvider,
    resolve_config,
)
from describe.global_config import DEFAULT_MAX_LINES, DEFAULT_TIMEOUT, GlobalConfigError
from describe.cli.utils import mask_key

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage describe configuration",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    load_dotenv()
    try:
        file_config = global_config.load_file_config()
        # Show what is configured even if the API key is still missing
        config = resolve_config(file_config, require_api_key=False)
    except (GlobalConfigError, ConfigError) as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    path = global_config.get_config_file_path()
    if global_config.is_configured():
        typer.echo(f"Current describe configuration ({path}):")
    else:
        typer.echo(f"No config file at {path}, using defaults:")
    typer.echo()
    typer.echo(f"  Provider: {config.provider.value}")
    typer.echo(f"  Model: {config.model}")
    typer.echo(f"  Endpoint: {config.api_endpoint}")
    typer.echo(f"  Max Lines: {config.max_lines if config.max_lines > 0 else 'unlimited'}")
    typer.echo(f"  Timeout: {config.timeout:g}s")
    typer.echo(f"  Debug: {config.debug}")
    env_var = API_KEY_ENV_VARS.get(config.provider)
    if env_var:
        typer.echo(f"  API Key: {mask_key(config.api_key)}")
        if not config.api_key:
            typer.echo()
            typer.echo(
                f"Warning: {env_var} environment variable or api_key in config file "
                f"required for {config.provider.value} provider",
                err=True,
            )


@config_app.command("init")
def config_init(
    provider: str = typer.Option(
        "ollama",
        "--provider",
        help="Provider to write into the new config file (ollama or openrouter)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config file",
    ),
) -> None:
    """Write a config file with default settings."""
    try:
        llm_provider = LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo("Valid providers: " + ", ".join(p.value for p in LLMProvider))
        raise typer.Exit(1)

    path = global_config.get_config_file_path()
    if global_config.is_configured() and not force:
        typer.echo(f"Config file already exists at {path}. Use --force to overwrite.", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_global_config({
            "provider": llm_provider.value,
            "api_endpoint": DEFAULT_ENDPOINTS[llm_provider],
            "model": DEFAULT_MODELS[llm_provider],
            "debug": False,
            "max_lines": DEFAULT_MAX_LINES,
            "timeout": DEFAULT_TIMEOUT,
        })
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Config written to {path}")
