"""Command-line interface for the album share publisher."""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from album_share_publisher.config import Settings
from album_share_publisher.models import AlbumShareData, Platform
from album_share_publisher.publisher import SocialPublisher
from album_share_publisher.url_filter import sanitize

app = typer.Typer(
    name="album-share",
    help="Publish photo albums to social platforms",
    add_completion=False,
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


async def async_publish(
    settings: Settings,
    platforms: list[str],
    data: AlbumShareData,
    message: Optional[str],
) -> int:
    """Async publish implementation.

    Args:
        settings: Provider credentials
        platforms: Platform tags to publish to
        data: Album share data
        message: Custom post text

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    async with SocialPublisher(settings) as publisher:
        results = await publisher.publish_to_social(platforms, data, message)

    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    console.print("\n[bold]Publish Summary:[/bold]")
    console.print(f"  Total platforms: {len(results)}")
    console.print(f"  [green]Successful: {successful}[/green]")
    console.print(f"  [red]Failed: {failed}[/red]")

    for result in results:
        if result.success:
            console.print(f"  + {result.platform}: {result.post_url or 'published'}")
        else:
            console.print(f"  - {result.platform}: {result.error}")

    return 1 if failed else 0


async def async_status(settings: Settings) -> dict[Platform, bool]:
    async with SocialPublisher(settings) as publisher:
        return publisher.get_configured_platforms()


@app.command()
def status(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Show which platforms have enough configuration to publish.

    Reads credentials from the environment; no network request is made.
    """
    setup_logging(verbose)
    settings = load_settings()

    configured = asyncio.run(async_status(settings))

    table = Table(title="Platform configuration")
    table.add_column("Platform")
    table.add_column("Tag")
    table.add_column("Configured")
    for platform, ready in configured.items():
        table.add_row(
            platform.label,
            platform.value,
            "[green]yes[/green]" if ready else "[red]no[/red]",
        )
    console.print(table)


@app.command()
def publish(
    platforms: list[str] = typer.Option(
        ...,
        "--platform",
        "-p",
        help=f"Platform to publish to (repeatable): {', '.join(p.value for p in Platform)}",
    ),
    title: str = typer.Option(..., "--title", help="Album title"),
    public_url: str = typer.Option(..., "--public-url", help="Public album URL"),
    description: Optional[str] = typer.Option(None, "--description", help="Album description"),
    cover_photo_url: Optional[str] = typer.Option(
        None, "--cover-photo-url", help="Cover photo URL"
    ),
    photo_urls: Optional[list[str]] = typer.Option(
        None, "--photo-url", help="Photo URL (repeatable)"
    ),
    photo_count: Optional[int] = typer.Option(
        None,
        "--photo-count",
        min=0,
        help="Photo count shown in captions (defaults to the number of photo URLs)",
    ),
    campaign_name: str = typer.Option("", "--campaign", help="Campaign name"),
    message: Optional[str] = typer.Option(
        None, "--message", "-m", help="Custom text replacing the description"
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be published without making API calls",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Publish one album to the selected social platforms.

    Every platform is attempted concurrently; the exit code is 1 when any of
    them failed.
    """
    setup_logging(verbose)
    settings = load_settings()

    photo_urls = photo_urls or []
    data = AlbumShareData(
        title=title,
        public_url=public_url,
        campaign_name=campaign_name,
        description=description,
        cover_photo_url=cover_photo_url,
        photo_urls=photo_urls,
        photo_count=len(photo_urls) if photo_count is None else photo_count,
    )

    if dry_run:
        safe_data = sanitize(data)
        console.print("[bold][DRY RUN] Would publish:[/bold]")
        console.print(f"  Title: {safe_data.title}")
        console.print(f"  Public URL: {safe_data.public_url or '(removed)'}")
        console.print(f"  Photos: {len(safe_data.photo_urls)} of {len(data.photo_urls)}")
        console.print(f"  Platforms: {', '.join(platforms)}")
        raise typer.Exit(0)

    exit_code = asyncio.run(async_publish(settings, platforms, data, message))
    raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
