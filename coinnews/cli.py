"""
Command line access to the news service.
"""
from __future__ import annotations

import json
import logging
from typing import List, Optional

import click
from dotenv import load_dotenv

from coinnews.cache import NewsCache
from coinnews.exceptions import TransportError
from coinnews.models import Article
from coinnews.normalizer import to_dicts
from coinnews.service import NewsService
from coinnews.settings import load_settings
from coinnews.status import build_status
from coinnews.timefmt import format_time_ago


def _build_service() -> NewsService:
    settings = load_settings()
    return NewsService(cache=NewsCache(ttl_seconds=settings.cache_ttl_seconds), settings=settings)


def _echo_articles(articles: List[Article], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(to_dicts(articles), ensure_ascii=False, indent=2))
        return
    if not articles:
        click.echo("No news found.")
        return
    for article in articles:
        age = format_time_ago(article.published_at) if article.published_at else "?"
        click.echo(f"[{age}] {article.source}: {article.title}")
        if article.url:
            click.echo(f"    {article.url}")


@click.group()
@click.option("--env-file", default=".env", show_default=True, help="Dotenv file loaded before reading settings.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, env_file: str, verbose: bool):
    load_dotenv(env_file)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    service = _build_service()
    ctx.call_on_close(service.http.close)
    ctx.obj = service


@cli.command()
@click.argument("symbol")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum number of articles.")
@click.option("--json", "as_json", is_flag=True, help="Print articles as JSON.")
@click.pass_obj
def coin(service: NewsService, symbol: str, limit: Optional[int], as_json: bool):
    """Show news for a coin SYMBOL (e.g. BTC)."""
    try:
        articles = service.fetch_topic_news(symbol, limit)
    except TransportError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_articles(articles, as_json)


@cli.command()
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum number of articles.")
@click.option("--json", "as_json", is_flag=True, help="Print articles as JSON.")
@click.pass_obj
def general(service: NewsService, limit: Optional[int], as_json: bool):
    """Show the unfiltered crypto news feed."""
    try:
        articles = service.fetch_general_news(limit)
    except TransportError as exc:
        raise click.ClickException(str(exc)) from exc
    _echo_articles(articles, as_json)


@cli.command()
@click.pass_obj
def status(service: NewsService):
    """Print service status as JSON."""
    click.echo(json.dumps(build_status(service), indent=2))


if __name__ == "__main__":  # pragma: no cover
    cli()
