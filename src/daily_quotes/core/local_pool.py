"""Embedded offline quotes used when no live source delivers."""

from typing import Iterable, Optional

from daily_quotes.core.entities import Quote
from daily_quotes.core.errors import PoolConfigurationError
from daily_quotes.core.matching import filter_quotes


def _q(quote_id: str, content: str, author: str, *tags: str) -> Quote:
    return Quote(id=quote_id, content=content, author=author, tags=frozenset(tags))


LOCAL_QUOTES: tuple[Quote, ...] = (
    _q("local:01", "The only way to do great work is to love what you do.",
       "Steve Jobs", "motivational", "work"),
    _q("local:02", "Innovation distinguishes between a leader and a follower.",
       "Steve Jobs", "innovation", "leadership"),
    _q("local:03", "The future belongs to those who believe in the beauty of their dreams.",
       "Eleanor Roosevelt", "dreams", "future"),
    _q("local:04", "It is during our darkest moments that we must focus to see the light.",
       "Aristotle", "wisdom", "hope"),
    _q("local:05", "Success is not final, failure is not fatal: it is the courage to continue that counts.",
       "Winston Churchill", "success", "courage"),
    _q("local:06", "Knowing yourself is the beginning of all wisdom.",
       "Aristotle", "wisdom", "self"),
    _q("local:07", "The journey of a thousand miles begins with one step.",
       "Lao Tzu", "beginnings", "perseverance"),
    _q("local:08", "In the middle of every difficulty lies opportunity.",
       "Albert Einstein", "opportunity", "adversity"),
    _q("local:09", "It always seems impossible until it's done.",
       "Nelson Mandela", "perseverance", "motivational"),
    _q("local:10", "The only true wisdom is in knowing you know nothing.",
       "Socrates", "wisdom", "knowledge"),
    _q("local:11", "What we think, we become.",
       "Buddha", "mind", "inspirational"),
    _q("local:12", "Act as if what you do makes a difference. It does.",
       "William James", "inspirational", "action"),
    _q("local:13", "Happiness is not something ready made. It comes from your own actions.",
       "Dalai Lama", "happiness", "action"),
    _q("local:14", "You miss 100% of the shots you don't take.",
       "Wayne Gretzky", "courage", "sports"),
    _q("local:15", "Well done is better than well said.",
       "Benjamin Franklin", "action", "work"),
)


class LocalQuotePool:
    """Immutable pool of curated quotes with keyword filtering."""
    
    def __init__(self, quotes: Iterable[Quote] = LOCAL_QUOTES) -> None:
        self._quotes = tuple(quotes)
        
        if not self._quotes:
            raise PoolConfigurationError("Local quote pool cannot be empty")
        
        ids = [quote.id for quote in self._quotes]
        if len(set(ids)) != len(ids):
            raise PoolConfigurationError("Local quote pool contains duplicate ids")
    
    def __len__(self) -> int:
        return len(self._quotes)
    
    @property
    def quotes(self) -> tuple[Quote, ...]:
        return self._quotes
    
    def matches(self, query: Optional[str]) -> list[Quote]:
        """Quotes matching the query; all quotes for an empty query."""
        if not query:
            return list(self._quotes)
        return filter_quotes(self._quotes, query)
