"""Keyword matching shared by the local pool and client-side filtering."""

from typing import Iterable

from daily_quotes.core.entities import Quote


def matches_query(quote: Quote, query: str) -> bool:
    """
    Check whether the quote matches a tag or free-text query.
    
    Args:
        quote: Quote to check
        query: Tag or search text
        
    Returns:
        True if the query is a case-insensitive substring of the content,
        the author, or any tag. An empty query matches everything.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return True
    
    if needle in quote.content.lower() or needle in quote.author.lower():
        return True
    return any(needle in tag for tag in quote.tags)


def filter_quotes(quotes: Iterable[Quote], query: str) -> list[Quote]:
    """Return the quotes matching the query, in their original order."""
    return [quote for quote in quotes if matches_query(quote, query)]
