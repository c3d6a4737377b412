"""Search history kept client-side as a JSON list under one session key."""
import json
import logging

logger = logging.getLogger(__name__)

MAX_HISTORY = 10


class SearchHistory:
    """Most-recent-first list of distinct queries stored in ``store[key]``."""

    def __init__(self, store, key, limit=MAX_HISTORY):
        self.store = store
        self.key = key
        self.limit = limit

    @property
    def entries(self):
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            entries = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Discarding unreadable search history")
            return []
        if not isinstance(entries, list):
            return []
        return [e for e in entries if isinstance(e, str)][:self.limit]

    def add(self, query):
        query = (query or '').strip()
        if not query:
            return self.entries
        entries = [query] + [e for e in self.entries if e != query]
        entries = entries[:self.limit]
        self.store[self.key] = json.dumps(entries)
        return entries

    def clear(self):
        self.store.pop(self.key, None)
