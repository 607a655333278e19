"""Bounded window of recently served quote ids."""

from collections import OrderedDict

from daily_quotes.core.entities import Quote

DEFAULT_CAPACITY = 10


class RecentHistory:
    """Insertion-ordered set of quote ids, oldest evicted first.
    
    Lives for one session only; never persisted.
    """
    
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("History capacity must be a positive integer")
        self.capacity = capacity
        self._ids: OrderedDict[str, None] = OrderedDict()
        self.resets = 0
    
    def __contains__(self, quote_id: object) -> bool:
        return quote_id in self._ids
    
    def __len__(self) -> int:
        return len(self._ids)
    
    def is_seen(self, quote: Quote) -> bool:
        """Check if quote was served recently."""
        return quote.id in self
    
    def add(self, quote_id: str) -> None:
        """Record an id as the newest entry, evicting the oldest when over capacity."""
        if quote_id in self._ids:
            self._ids.move_to_end(quote_id)
            return
        
        self._ids[quote_id] = None
        while len(self._ids) > self.capacity:
            self._ids.popitem(last=False)
    
    def mark_seen(self, quote: Quote) -> None:
        self.add(quote.id)
    
    def reset(self) -> None:
        """Forget every recorded id."""
        self._ids.clear()
        self.resets += 1
    
    def ids(self) -> list[str]:
        """Recorded ids, oldest first."""
        return list(self._ids)
    
    def filter_unseen(self, quotes: list[Quote]) -> tuple[list[Quote], int]:
        """Filter out recently seen quotes.
        
        Returns:
            Tuple of (unseen_quotes, filtered_count)
        """
        unseen = []
        filtered_count = 0
        
        for quote in quotes:
            if self.is_seen(quote):
                filtered_count += 1
            else:
                unseen.append(quote)
        
        return unseen, filtered_count
    
    def get_stats(self) -> dict:
        """Get statistics about the window."""
        return {
            "size": len(self._ids),
            "capacity": self.capacity,
            "resets": self.resets,
        }
