"""Typer CLI entrypoint for redditfeed."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from redditfeed.config import DisplayType, FeedConfig, FeedType, ImageQuality, load_config
from redditfeed.log import LogLevel, setup_logging
from redditfeed.service import run_fetch_cycle

app = typer.Typer(help="Fetch a Reddit feed page and emit display-ready posts as JSON.", no_args_is_help=True)


@app.callback()
def main() -> None:
    """redditfeed command group."""


@app.command()
def fetch(
    config_file: Path | None = typer.Option(None, "--config", exists=True, readable=True, dir_okay=False),
    subreddit: list[str] = typer.Option(["all"], "--subreddit", "-s"),
    feed_type: FeedType = typer.Option(FeedType.HOT, "--type"),
    count: int = typer.Option(10, min=1, max=100),
    display_type: DisplayType = typer.Option(DisplayType.HEADLINES),
    image_quality: ImageQuality = typer.Option(ImageQuality.MID_HIGH),
    character_limit: int | None = typer.Option(None, min=0),
    log_level: LogLevel = typer.Option(LogLevel.INFO, case_sensitive=False),
) -> None:
    """Run one fetch cycle and print the resulting posts or error message."""

    setup_logging(log_level)

    try:
        if config_file is not None:
            config = load_config(config_file)
        else:
            config = FeedConfig(
                subreddit=subreddit[0] if len(subreddit) == 1 else subreddit,
                feed_type=feed_type,
                count=count,
                display_type=display_type,
                image_quality=image_quality,
                character_limit=character_limit,
            )
    except (ValidationError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    result = run_fetch_cycle(config)
    typer.echo(result.model_dump_json(indent=2))

    if not result.ok:
        raise typer.Exit(code=1)
