# unitconv/cli.py

from __future__ import annotations

from typing import Optional

import typer

from unitconv.core.config import settings
from unitconv.core.exceptions import (
    ConversionError,
    GitHubServiceError,
    ValidationError,
)
from unitconv.core.logger import setup_logging
from unitconv.services.conversion import ConversionService
from unitconv.services.github_activity import GitHubActivityService, format_events
from unitconv.services.units import UNIT_LISTS, Category, find_category

app = typer.Typer(help="Unit converter service and GitHub user activity tools.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
):
    setup_logging(level="DEBUG" if verbose else "WARNING", to_file=False)


@app.command("convert")
def convert(
    value: str = typer.Argument(..., help="Value to convert (e.g. 100, -40, 2.5)"),
    from_unit: str = typer.Argument(..., metavar="FROM"),
    to_unit: str = typer.Argument(..., metavar="TO"),
    category: Optional[Category] = typer.Option(
        None, "--category", "-c", help="Inferred from FROM when omitted."
    ),
):
    """Convert VALUE from one unit to another.

    Negative values need a "--" separator: unitconv convert -- -40 c f
    """
    if category is None:
        category = find_category(from_unit)
        if category is None:
            typer.echo(f"Error: cannot infer category from unit '{from_unit}'", err=True)
            raise typer.Exit(code=2)

    try:
        result = ConversionService.convert(category, value, from_unit, to_unit)
    except ValidationError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=2)
    except ConversionError as e:
        typer.echo(f"Conversion failed: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{result:.10g} {to_unit.strip().lower()}")


@app.command("units")
def units(category: Optional[Category] = typer.Argument(None)):
    """List supported unit symbols."""
    selected = [category] if category else list(UNIT_LISTS)
    for c in selected:
        typer.echo(f"{c.value}: {', '.join(UNIT_LISTS[c])}")


@app.command("serve")
def serve(
    host: str = typer.Option(settings.HOST),
    port: int = typer.Option(settings.PORT),
    reload: bool = typer.Option(False),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("unitconv.main:app", host=host, port=port, reload=reload)


@app.command("github-activity")
def github_activity(
    username: str = typer.Argument(..., help="GitHub username to fetch activity for"),
    limit: int = typer.Option(0, "--limit", "-n", help="Show at most N events (0 = all)."),
    event_type: Optional[str] = typer.Option(
        None, "--type", "-t", help="Only show one event type, e.g. PushEvent."
    ),
):
    """Fetch and display recent GitHub activity for USERNAME."""
    if not username.strip():
        typer.echo("Error: Username cannot be empty", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"Fetching GitHub activity for user: {username}")
    service = GitHubActivityService()
    try:
        events = service.get_user_activity(username)
    except GitHubServiceError as e:
        typer.echo(f"Error fetching GitHub activity: {e.message}", err=True)
        if "User not found" in e.message:
            typer.echo(
                "Please verify the username is correct and the user exists on GitHub",
                err=True,
            )
        elif "rate limit" in e.message:
            typer.echo("GitHub API rate limit exceeded. Please try again later.", err=True)
        raise typer.Exit(code=1)
    finally:
        service.client.close()

    if event_type:
        events = service.filter_events_by_type(events, event_type)
    if limit > 0:
        events = service.limit_events(events, limit)

    if not events:
        typer.echo(f"No recent activity found for user: {username}")
        return

    typer.echo(f"Found {len(events)} recent events:")
    typer.echo("")
    typer.echo(format_events(events))


if __name__ == "__main__":
    app()
