"""CLI entry point for gitscribe."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from gitscribe.config import GitscribeConfig, load_config
from gitscribe.config.loader import DEFAULT_CONFIG_TEMPLATE, PROJECT_CONFIG_PATH, user_config_path
from gitscribe.drafter import Drafter
from gitscribe.llm.models import GitscribeError, Provider
from gitscribe.vcs import commit, read_staged_diff

app = typer.Typer(
    name="gitscribe",
    help="Write commit messages for your staged changes with Claude, OpenAI or Gemini.",
)

config_app = typer.Typer(help="Manage gitscribe configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: GitscribeConfig | None = None


def _get_config() -> GitscribeConfig:
    if _config is None:
        return load_config()
    return _config


def _setup_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)-8s %(name)s: %(message)s")
    logging.getLogger().setLevel(logging.DEBUG if verbose else _LOG_LEVELS[level])


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to gitscribe.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    do_commit: Annotated[
        bool, typer.Option("--commit", "-C", help="Commit after generating the message")
    ] = False,
    provider: Annotated[
        str | None,
        typer.Option("--provider", "-p", help="AI provider to use (claude, openai, gemini)"),
    ] = None,
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Model to use (overrides the provider default)"),
    ] = None,
) -> None:
    """Global options. Without a subcommand, runs `generate` with the given flags."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _setup_logging(_config.log_level, verbose)

    if ctx.invoked_subcommand is None:
        generate(do_commit=do_commit, provider=provider, model=model)


def _commit_hint(message: str) -> str:
    escaped = message.replace('"', '\\"')
    return f'git commit -m "{escaped}"'


@app.command()
def generate(
    do_commit: Annotated[
        bool, typer.Option("--commit", "-C", help="Commit after generating the message")
    ] = False,
    provider: Annotated[
        str | None,
        typer.Option("--provider", "-p", help="AI provider to use (claude, openai, gemini)"),
    ] = None,
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Model to use (overrides the provider default)"),
    ] = None,
) -> None:
    """Generate a commit message from the staged diff."""
    cfg = _get_config()

    try:
        diff = read_staged_diff()
        result = asyncio.run(Drafter(cfg).draft(diff, provider=provider, model=model))
    except GitscribeError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if result.nothing_to_do:
        rprint("[yellow]No changes to commit.[/yellow]")
        return

    rprint(
        Panel(
            escape(result.message),
            title="Generated commit message",
            subtitle=f"{result.provider} / {result.model}",
            border_style="blue",
        )
    )

    if do_commit:
        try:
            commit(result.message)
        except GitscribeError as e:
            rprint(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        rprint("[green]Changes committed successfully![/green]")
    else:
        rprint("\nTo commit with this message, run:")
        typer.echo(_commit_hint(result.message))


@app.command()
def providers() -> None:
    """List supported providers and the environment variables they read."""
    table = Table(title="Providers")
    table.add_column("Name", style="cyan")
    table.add_column("Default model", style="green")
    table.add_column("API key env")
    table.add_column("Model env", style="yellow")
    for p in Provider:
        table.add_row(p.value, p.default_model, p.api_key_env, p.model_env)
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration and whether the provider key is set."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))

    env_var = Provider.parse(cfg.llm.provider).api_key_env
    status = "[green]set[/green]" if os.environ.get(env_var) else "[red]not set[/red]"
    rprint(f"{env_var}: {status}")


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
    user: bool = typer.Option(
        False, "--global", help="Write ~/.gitscribe/config.yaml instead of ./gitscribe.yaml"
    ),
) -> None:
    """Create a default config file for this repository or for the current user."""
    target = user_config_path() if user else PROJECT_CONFIG_PATH
    if target.exists() and not force:
        rprint(f"[yellow]{escape(str(target))} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
