"""Tests for keyword matching."""

from daily_quotes.core import Quote, filter_quotes, matches_query


def _quote(content: str, author: str = "Someone", tags=()) -> Quote:
    return Quote(id=f"t:{content}", content=content, author=author, tags=frozenset(tags))


def test_matches_content_author_and_tags() -> None:
    quote = _quote("The only true Wisdom is knowing nothing.", author="Socrates", tags=["knowledge"])
    
    assert matches_query(quote, "wisdom")
    assert matches_query(quote, "SOCRATES")
    assert matches_query(quote, "know")
    assert matches_query(quote, "ledge")
    assert not matches_query(quote, "courage")


def test_empty_query_matches_everything() -> None:
    quote = _quote("Anything")
    
    assert matches_query(quote, "")
    assert matches_query(quote, "   ")


def test_filter_quotes_keeps_order() -> None:
    quotes = [_quote("Be brave"), _quote("Be kind"), _quote("Stay brave")]
    
    result = filter_quotes(quotes, "brave")
    
    assert [q.content for q in result] == ["Be brave", "Stay brave"]
