"""CLI commands for GitHub Actions Hooks."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from github_actions_hooks import __version__
from github_actions_hooks.core.config import get_settings
from github_actions_hooks.core.exceptions import SettingsStoreException
from github_actions_hooks.hooks.base import PUBLISH_STATUS, HookEvent
from github_actions_hooks.plugin import GitHubActionsHooks
from github_actions_hooks.settings import page
from github_actions_hooks.settings.store import JsonFileSettingsStore
from github_actions_hooks.webhooks.models import DispatchOutcome

app = typer.Typer(name="github-actions-hooks", help="GitHub Actions Hooks CLI")
console = Console()

OptionsFileOption = typer.Option(None, "--options-file", help="JSON options file (default: OPTIONS_FILE)")


def _open_store(options_file: Optional[Path]) -> JsonFileSettingsStore:
    return JsonFileSettingsStore(options_file or get_settings().options_file)


def _mask(value: str) -> str:
    if not value:
        return ""
    return "*" * 8


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"[bold green]GitHub Actions Hooks v{__version__}[/bold green]")


@app.command()
def show(options_file: Optional[Path] = OptionsFileOption) -> None:
    """Show the settings page with current option values."""
    store = _open_store(options_file)
    page.setup(store)

    table = Table(title=page.PAGE_TITLE)
    table.add_column("Option")
    table.add_column("Label")
    table.add_column("Value")

    try:
        for settings_field in page.FIELDS:
            value = page.field_value(store, settings_field)
            if settings_field.is_secret:
                value = _mask(value)
            table.add_row(settings_field.uid, settings_field.label, value)
    except SettingsStoreException as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(code=1)

    console.print(page.PAGE_DESCRIPTION)
    console.print(table)
    for notice in page.override_notices(get_settings()):
        console.print(f"[yellow]{notice}[/yellow]")


@app.command()
def configure(
    address: Optional[str] = typer.Option(None, "--address", help="Repository dispatch API endpoint"),
    token: Optional[str] = typer.Option(None, "--token", help="Personal access token"),
    options_file: Optional[Path] = OptionsFileOption,
) -> None:
    """Store webhook options."""
    if address is None and token is None:
        console.print("[yellow]Nothing to configure: pass --address and/or --token[/yellow]")
        raise typer.Exit(code=2)

    store = _open_store(options_file)
    try:
        if address is not None:
            store.set(page.WEBHOOK_ADDRESS, address)
        if token is not None:
            store.set(page.WEBHOOK_TOKEN, token)
    except SettingsStoreException as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Saved to {store.path}[/green]")


@app.command()
def save(
    item_id: int,
    status: str = typer.Option(PUBLISH_STATUS, help="Item status after the save"),
    event: HookEvent = typer.Option(HookEvent.SAVE_POST, help="Save event to fire"),
    options_file: Optional[Path] = OptionsFileOption,
) -> None:
    """Fire a content-save event.

    Args:
        item_id: Saved item identifier
    """
    store = _open_store(options_file)

    with GitHubActionsHooks(store) as plugin:
        try:
            target = plugin.dispatcher.resolve_target()
        except SettingsStoreException as e:
            console.print(f"[red]✗ {e.message}[/red]")
            raise typer.Exit(code=1)

        outcome = plugin.save(event, item_id, status)

    if outcome == DispatchOutcome.SKIPPED:
        console.print(f"[yellow]Item {item_id} is '{status}', nothing dispatched[/yellow]")
    elif outcome == DispatchOutcome.DISABLED:
        console.print("[yellow]Webhook is not configured, nothing dispatched[/yellow]")
    elif outcome == DispatchOutcome.SENT and target is not None:
        console.print(f"[green]✓ Dispatched item {item_id} to {target.address}[/green]")
    else:
        address = target.address if target is not None else "webhook"
        console.print(f"[red]✗ Dispatch of item {item_id} to {address} failed[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
