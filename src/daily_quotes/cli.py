"""CLI entry point for daily quotes."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from daily_quotes.adapters.favorites import YamlFavoritesStore
from daily_quotes.adapters.sources import build_sources
from daily_quotes.config import Settings, get_settings
from daily_quotes.core import LocalQuotePool, Quote, QuoteResult, RecentHistory, SourceChain
from daily_quotes.observability import setup_logging
from daily_quotes.use_cases import QuoteService

app = typer.Typer(help="Quote of the day from public quote APIs, with offline fallback.")
favorites_app = typer.Typer(help="Manage saved favorite quotes.")
app.add_typer(favorites_app, name="favorites")


def build_service(settings: Settings) -> QuoteService:
    """Wire the source chain, local pool and history from settings."""
    chain = SourceChain(build_sources(settings), timeout=settings.timeout)
    return QuoteService(
        chain=chain,
        pool=LocalQuotePool(),
        history=RecentHistory(settings.history_capacity),
        accept_duplicates_when_exhausted=settings.history.accept_duplicates_when_exhausted,
    )


def format_quote(quote: Quote) -> str:
    """Render a quote the way it is copied and shared."""
    return f"\"{quote.content}\" — {quote.author}"


def _print_quote(quote: Quote) -> None:
    print(f"\n💬 {format_quote(quote)}")
    if quote.tags:
        print(f"  └─ Tags: {', '.join(sorted(quote.tags))}")
    print(f"  └─ ID: {quote.id}")


def _print_result(result: QuoteResult) -> None:
    _print_quote(result.quote)
    if result.filter_missed:
        print("  ⚠️  No offline quotes match that tag, showing a random one")
    if result.degraded:
        print("  ⚠️  Using offline quote (API temporarily unavailable)")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Fetch inspirational quotes."""
    settings = get_settings(config)
    level = "DEBUG" if verbose else settings.logging.level
    setup_logging(level, json_output=settings.logging.json)
    ctx.obj = settings


@app.command("random")
def random_quote(
    ctx: typer.Context,
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Tag or keyword to narrow by"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="Quotes to fetch in this session"),
    save: bool = typer.Option(False, "--save", help="Add the last quote to favorites"),
) -> None:
    """Show random quotes, optionally filtered by tag."""
    settings: Settings = ctx.obj
    results = asyncio.run(_resolve_many(build_service(settings), tag, count))

    for result in results:
        _print_result(result)

    if save and results:
        store = YamlFavoritesStore(settings.favorites_path)
        quote = results[-1].quote
        if store.contains(quote.id):
            print(f"\n⭐ Already in favorites: {quote.id}")
        else:
            store.add(quote)
            print(f"\n⭐ Saved to favorites: {settings.favorites_path}")


async def _resolve_many(service: QuoteService, tag: Optional[str], count: int) -> list[QuoteResult]:
    return [await service.resolve(tag) for _ in range(count)]


@app.command("search")
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Text to look for"),
) -> None:
    """Find a quote by keyword."""
    settings: Settings = ctx.obj
    result = asyncio.run(build_service(settings).search(query))

    if not result.found:
        print("❌ No results found in offline quotes.")
        raise typer.Exit(code=1)

    _print_quote(result.quote)
    if result.degraded:
        print("  ⚠️  Using offline search results (API temporarily unavailable)")


@favorites_app.command("list")
def favorites_list(ctx: typer.Context) -> None:
    """List saved favorites, newest first."""
    store = YamlFavoritesStore(ctx.obj.favorites_path)
    favorites = store.items()

    print(f"\n⭐ Favorites ({len(favorites)})")
    if not favorites:
        print("  No favorites yet.")
        return

    for quote in favorites:
        content = quote.content if len(quote.content) <= 120 else quote.content[:120] + "..."
        print(f"  • [{quote.id}] \"{content}\" — {quote.author}")


@favorites_app.command("random")
def favorites_random(ctx: typer.Context) -> None:
    """Show a random favorite."""
    quote = YamlFavoritesStore(ctx.obj.favorites_path).random_pick()
    if quote is None:
        print("No favorites yet.")
        raise typer.Exit(code=1)
    _print_quote(quote)


@favorites_app.command("remove")
def favorites_remove(
    ctx: typer.Context,
    quote_id: str = typer.Argument(..., help="Id of the quote to remove"),
) -> None:
    """Remove a favorite by id."""
    if YamlFavoritesStore(ctx.obj.favorites_path).remove(quote_id):
        print(f"✓ Removed {quote_id}")
    else:
        print(f"⚠️  {quote_id} is not in favorites")
        raise typer.Exit(code=1)


@favorites_app.command("clear")
def favorites_clear(ctx: typer.Context) -> None:
    """Remove all favorites."""
    YamlFavoritesStore(ctx.obj.favorites_path).clear()
    print("✓ Favorites cleared")


if __name__ == "__main__":
    app()
