"""Command-line interface for gitcard."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gitcard import GitCardConfig, ProfileLoader, save_json, __version__
from gitcard.logging import configure_logging
from gitcard.models.result import LoadResult, ProfileLoaded
from gitcard.views import render_layout, render_profile_state

app = typer.Typer(
    name="gitcard",
    help="GitHub profile card",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"gitcard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """gitcard - GitHub profile card."""
    pass


def _config(username: Optional[str]) -> GitCardConfig:
    config = GitCardConfig(username=username) if username else GitCardConfig()
    configure_logging(config)
    return config


async def _load(config: GitCardConfig) -> LoadResult:
    async with ProfileLoader(config) as loader:
        return await loader.load()


@app.command()
def show(
    username: Optional[str] = typer.Option(
        None, "--user", "-u", help="GitHub username (defaults to GITCARD_USERNAME)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save the load result as JSON"
    ),
):
    """Load a profile and print it as a table."""
    config = _config(username)
    result = asyncio.run(_load(config))

    if output:
        save_json(result, output)
        console.print(f"[dim]Saved to {output}[/dim]")

    if not isinstance(result, ProfileLoaded):
        err_console.print(
            f"[red]Failed to load @{result.username} ({result.error.value}): {result.message}[/red]"
        )
        raise typer.Exit(1)

    _print_profile_table(result)


@app.command()
def render(
    username: Optional[str] = typer.Option(
        None, "--user", "-u", help="GitHub username (defaults to GITCARD_USERNAME)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write HTML here instead of stdout"
    ),
):
    """Render the profile page to HTML."""
    config = _config(username)
    result = asyncio.run(_load(config))

    outlet = render_profile_state(result, width=config.avatar_width)
    html = render_layout(outlet, title=f"{result.username} | gitcard", active="/github")

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        err_console.print(f"[dim]Saved to {output}[/dim]")
    else:
        typer.echo(html)

    if not isinstance(result, ProfileLoaded):
        raise typer.Exit(1)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
):
    """Serve the pages over HTTP."""
    import uvicorn

    config = GitCardConfig()
    uvicorn.run(
        "gitcard.api:app",
        host=host or config.host,
        port=port or config.port,
    )


def _print_profile_table(result: ProfileLoaded):
    """Print detailed profile as table."""
    p = result.profile

    table = Table(title=f"@{p.login or result.username}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Name", p.name or "-")
    table.add_row("Bio", p.bio or "-")
    table.add_row("Followers", f"{p.followers:,}")
    table.add_row("Following", f"{p.following:,}" if p.following is not None else "-")
    table.add_row("Public repos", str(p.public_repos) if p.public_repos is not None else "-")
    table.add_row("Avatar", p.avatar_url)
    table.add_row("Profile", str(p.html_url) if p.html_url else "-")

    console.print(table)


if __name__ == "__main__":
    app()
