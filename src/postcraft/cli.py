"""Command-line interface for postcraft.

Every command builds the service stack from settings (environment and
``.env``), runs one operation and prints the result as JSON.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import click

from postcraft import __version__
from postcraft.config import configure_logging, get_logger, get_settings
from postcraft.core.exceptions import PostcraftError
from postcraft.services.drafts import DraftService

logger = get_logger(__name__)


def _run(operation: Callable[[DraftService], Awaitable[Any]]) -> Any:
    """Build the service, run ``operation`` on it and always close it."""

    async def runner() -> Any:
        service = await DraftService.from_settings(get_settings())
        try:
            return await operation(service)
        finally:
            await service.close()

    try:
        return asyncio.run(runner())
    except PostcraftError as e:
        logger.error("cli.command.failed", error=e.message, details=e.details)
        raise click.ClickException(e.message) from e


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


@click.group()
@click.version_option(__version__, prog_name="postcraft")
@click.option("--log-level", default=None, help="Override the configured log level")
def cli(log_level: str | None) -> None:
    """Generate social posts in a user's own writing style."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level, settings.log_format, debug=settings.debug)


@cli.command("init")
def init_cmd() -> None:
    """Create the vector collection if it does not exist."""
    info = _run(lambda service: service.init())
    _echo_json(info)


@cli.command("ingest")
@click.argument("user_id")
@click.argument("texts", nargs=-1)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File with one post per line",
)
def ingest_cmd(user_id: str, texts: tuple[str, ...], file_path: Path | None) -> None:
    """Store posts for USER_ID and refresh their style profile."""
    all_texts = list(texts)
    if file_path is not None:
        all_texts.extend(
            line for line in file_path.read_text(encoding="utf-8").splitlines() if line.strip()
        )
    if not all_texts:
        raise click.UsageError("Provide post texts as arguments or with --file")

    report = _run(lambda service: service.ingest_texts(user_id, all_texts))
    _echo_json(
        {
            "user_id": report.user_id,
            "count": report.post_count,
            "style_profile": report.style_profile.model_dump(mode="json")
            if report.style_profile
            else None,
        }
    )


@cli.command("generate")
@click.argument("user_id")
@click.argument("idea")
@click.option("--variations", "-n", default=3, show_default=True, help="Number of drafts")
@click.option("--top-k", "-k", default=5, show_default=True, help="Example posts to retrieve")
def generate_cmd(user_id: str, idea: str, variations: int, top_k: int) -> None:
    """Generate drafts for IDEA in USER_ID's style."""
    result = _run(lambda service: service.generate(user_id, idea, variations, top_k))
    _echo_json(
        {
            "user_id": user_id,
            "idea": idea,
            "drafts": result.drafts,
            "confidence": round(result.confidence, 3),
            "similar_posts": [
                {
                    "text": sp.post.text,
                    "similarity": round(sp.similarity, 3),
                    "engagement": sp.post.engagement_score,
                }
                for sp in result.similar_posts
            ],
            "style_profile": result.style_profile.model_dump(mode="json")
            if result.style_profile
            else None,
        }
    )


@cli.command("regenerate")
@click.argument("user_id")
@click.argument("idea")
@click.option("--previous", "-p", multiple=True, help="A draft to avoid (repeatable)")
def regenerate_cmd(user_id: str, idea: str, previous: tuple[str, ...]) -> None:
    """Generate new drafts that differ from previous ones."""
    drafts = _run(lambda service: service.regenerate(user_id, idea, list(previous)))
    _echo_json({"user_id": user_id, "idea": idea, "drafts": drafts})


@cli.command("posts")
@click.argument("user_id")
@click.option("--limit", "-l", default=50, show_default=True, help="Posts per page")
@click.option("--offset", "-o", default=0, show_default=True, help="Posts to skip")
def posts_cmd(user_id: str, limit: int, offset: int) -> None:
    """List USER_ID's stored posts, newest first."""
    posts = _run(lambda service: service.list_posts(user_id, limit, offset))
    _echo_json(
        {
            "user_id": user_id,
            "count": len(posts),
            "posts": [post.model_dump(mode="json") for post in posts],
        }
    )


@cli.command("profile")
@click.argument("user_id")
def profile_cmd(user_id: str) -> None:
    """Show USER_ID's style profile."""
    profile = _run(lambda service: service.get_profile(user_id))
    if profile is None:
        raise click.ClickException(f"Style profile not found for {user_id}. Ingest posts first.")
    _echo_json(profile.model_dump(mode="json"))


@cli.command("forget")
@click.argument("user_id")
def forget_cmd(user_id: str) -> None:
    """Delete every stored post and the style profile of USER_ID."""
    _run(lambda service: service.forget(user_id))
    _echo_json({"user_id": user_id, "deleted": True})


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
