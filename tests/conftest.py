"""Shared test helpers."""

import asyncio
from typing import Optional, Union

import pytest

from daily_quotes.core import Quote, QuoteSource

Outcome = Union[Quote, Exception]


class FakeSource(QuoteSource):
    """Source replaying scripted outcomes, one per call."""
    
    def __init__(
        self,
        name: str,
        outcomes: list[Outcome],
        supports_search: bool = False,
        search_outcome: Optional[Outcome] = None,
        delay: float = 0.0,
    ) -> None:
        self.name = name
        self.outcomes = list(outcomes)
        self.supports_search = supports_search
        self.search_outcome = search_outcome
        self.delay = delay
        self.calls: list[Optional[str]] = []
        self.search_calls: list[str] = []
    
    async def fetch_quote(self, constraint: Optional[str] = None) -> Quote:
        self.calls.append(constraint)
        if self.delay:
            await asyncio.sleep(self.delay)
        outcome = self.outcomes[min(len(self.calls), len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
    
    async def search(self, query: str) -> Quote:
        self.search_calls.append(query)
        if isinstance(self.search_outcome, Exception):
            raise self.search_outcome
        if self.search_outcome is None:
            return await super().search(query)
        return self.search_outcome


def make_quote(quote_id: str, content: str = "Stay hungry, stay foolish.", author: str = "Steve Jobs", tags=()) -> Quote:
    return Quote(id=quote_id, content=content, author=author, tags=frozenset(tags))


@pytest.fixture
def quote_factory():
    return make_quote
