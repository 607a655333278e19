"""Tests for HTTP quote sources."""

import random

import httpx
import pytest

from daily_quotes.adapters.sources import (
    DummyJSONSource,
    HttpQuoteSource,
    QuotableSource,
    TypeFitSource,
    ZenQuotesSource,
)
from daily_quotes.core import SourceUnavailable


def _transport(routes: dict, requests: list | None = None) -> httpx.MockTransport:
    """Serve canned responses keyed by URL path."""
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        response = routes.get(request.url.path)
        if response is None:
            return httpx.Response(404, json={"statusCode": 404})
        if isinstance(response, Exception):
            raise response
        return response
    
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_quotable_random_with_tag() -> None:
    requests: list[httpx.Request] = []
    routes = {
        "/random": httpx.Response(200, json={
            "_id": "abc123",
            "content": "Life is what happens when you're busy making other plans.",
            "author": "John Lennon",
            "tags": ["Famous Quotes", "Life"],
        }),
    }
    source = QuotableSource(transport=_transport(routes, requests))
    
    quote = await source.fetch_quote("life")
    
    assert quote.id == "quotable:abc123"
    assert quote.author == "John Lennon"
    assert quote.tags == frozenset({"famous quotes", "life"})
    assert requests[0].url.params["tags"] == "life"
    assert str(requests[0].url).startswith("https://api.quotable.io/random")


@pytest.mark.asyncio
async def test_quotable_unknown_tag_is_failure() -> None:
    source = QuotableSource(transport=_transport({}))
    
    with pytest.raises(SourceUnavailable, match="HTTP 404"):
        await source.fetch_quote("no-such-tag")


@pytest.mark.asyncio
async def test_quotable_search() -> None:
    requests: list[httpx.Request] = []
    routes = {
        "/search/quotes": httpx.Response(200, json={
            "count": 1,
            "results": [{"_id": "s1", "content": "Courage is contagious.", "author": "Billy Graham", "tags": []}],
        }),
    }
    source = QuotableSource(transport=_transport(routes, requests))
    
    quote = await source.search("courage")
    
    assert quote.id == "quotable:s1"
    assert quote.tags == frozenset()
    assert requests[0].url.params["query"] == "courage"
    assert requests[0].url.params["limit"] == "1"


@pytest.mark.asyncio
async def test_quotable_empty_search_is_failure() -> None:
    routes = {"/search/quotes": httpx.Response(200, json={"count": 0, "results": []})}
    source = QuotableSource(transport=_transport(routes))
    
    with pytest.raises(SourceUnavailable, match="no search results"):
        await source.search("zzz")


@pytest.mark.asyncio
async def test_zenquotes_random_synthesizes_stable_id() -> None:
    routes = {"/api/random": httpx.Response(200, json=[{"q": "Be here now.", "a": "Ram Dass", "h": "<b>...</b>"}])}
    source = ZenQuotesSource(transport=_transport(routes))
    
    first = await source.fetch_quote()
    second = await source.fetch_quote()
    
    assert first == second
    assert first.id.startswith("zenquotes:")
    assert first.tags == frozenset()


@pytest.mark.asyncio
async def test_zenquotes_rate_limit_is_failure() -> None:
    routes = {"/api/random": httpx.Response(200, json=[{
        "q": "Too many requests. Obtain an auth key for unlimited access.",
        "a": "zenquotes.io",
    }])}
    source = ZenQuotesSource(transport=_transport(routes))
    
    with pytest.raises(SourceUnavailable, match="rate limited"):
        await source.fetch_quote()


@pytest.mark.asyncio
async def test_zenquotes_constraint_filters_batch() -> None:
    routes = {"/api/quotes": httpx.Response(200, json=[
        {"q": "Patience is bitter, but its fruit is sweet.", "a": "Aristotle"},
        {"q": "Wisdom begins in wonder.", "a": "Socrates"},
    ])}
    source = ZenQuotesSource(transport=_transport(routes), rng=random.Random(3))
    
    quote = await source.fetch_quote("wisdom")
    
    assert quote.author == "Socrates"
    
    with pytest.raises(SourceUnavailable, match="no quotes matching"):
        await source.fetch_quote("zzz")


@pytest.mark.asyncio
async def test_dummyjson_random_and_constrained() -> None:
    routes = {
        "/quotes/random": httpx.Response(200, json={"id": 42, "quote": "Stay hungry.", "author": "Steve Jobs"}),
        "/quotes": httpx.Response(200, json={"quotes": [
            {"id": 1, "quote": "Dream big.", "author": "Someone"},
            {"id": 2, "quote": "Act with courage.", "author": "Someone Else"},
        ], "total": 2}),
    }
    source = DummyJSONSource(transport=_transport(routes))
    
    quote = await source.fetch_quote()
    assert quote.id == "dummyjson:42"
    
    quote = await source.fetch_quote("courage")
    assert quote.id == "dummyjson:2"


@pytest.mark.asyncio
async def test_typefit_author_sentinels() -> None:
    routes = {"/api/quotes": httpx.Response(200, json=[
        {"text": "Genius is one percent inspiration.", "author": "Thomas Edison, type.fit"},
        {"text": "Nothing is impossible.", "author": "type.fit"},
        {"text": "", "author": "Broken"},
    ])}
    source = TypeFitSource(transport=_transport(routes))
    
    genius = await source.fetch_quote("genius")
    nothing = await source.fetch_quote("impossible")
    
    assert genius.author == "Thomas Edison"
    assert nothing.author == "Unknown"


@pytest.mark.asyncio
async def test_malformed_json_is_failure() -> None:
    routes = {"/quotes/random": httpx.Response(200, content=b"<html>oops</html>")}
    source = DummyJSONSource(transport=_transport(routes))
    
    with pytest.raises(SourceUnavailable, match="malformed JSON"):
        await source.fetch_quote()


@pytest.mark.asyncio
async def test_unexpected_shape_is_failure() -> None:
    routes = {"/quotes/random": httpx.Response(200, json=["not", "an", "object"])}
    source = DummyJSONSource(transport=_transport(routes))
    
    with pytest.raises(SourceUnavailable, match="unexpected payload"):
        await source.fetch_quote()


@pytest.mark.asyncio
async def test_network_error_is_failure() -> None:
    routes = {"/random": httpx.ConnectError("connection refused")}
    source = QuotableSource(transport=_transport(routes))
    
    with pytest.raises(SourceUnavailable, match="request failed"):
        await source.fetch_quote()


@pytest.mark.asyncio
async def test_server_error_is_failure() -> None:
    routes = {"/api/random": httpx.Response(503, text="Service Unavailable")}
    source = ZenQuotesSource(transport=_transport(routes))
    
    with pytest.raises(SourceUnavailable, match="HTTP 503"):
        await source.fetch_quote()


@pytest.mark.asyncio
async def test_custom_base_url() -> None:
    requests: list[httpx.Request] = []
    routes = {"/api/zenquotes/random": httpx.Response(200, json=[{"q": "Breathe.", "a": "Thich Nhat Hanh"}])}
    source = ZenQuotesSource(
        base_url="http://localhost:5173/api/zenquotes/",
        transport=_transport(routes, requests),
    )
    
    await source.fetch_quote()
    
    assert str(requests[0].url) == "http://localhost:5173/api/zenquotes/random"


def test_source_without_normalize_cannot_be_created() -> None:
    class IncompleteSource(HttpQuoteSource):
        name = "incomplete"
        
        async def fetch_quote(self, constraint=None):
            raise SourceUnavailable(self.name, "unused")
    
    with pytest.raises(TypeError, match="normalize"):
        IncompleteSource()
