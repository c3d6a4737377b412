"""Content aggregator - full reload of every category into one list."""
import logging

from classboard.errors import BackendError
from classboard.models import CATEGORIES, ContentItem

logger = logging.getLogger(__name__)


def fetch_category_items(backend, category):
    """Items of one category, newest first, tagged with the category."""
    return [ContentItem.from_record(doc_id, data, category)
            for doc_id, data in backend.fetch_category(category)]


def fetch_all_content(backend, categories=CATEGORIES):
    """
    Fetch every category and concatenate the results.

    Raises BackendError if any category fails; nothing partial is returned.
    """
    items = []
    for category in categories:
        items.extend(fetch_category_items(backend, category))
    return items


class ContentAggregator:
    """Holds the last successfully loaded content snapshot."""

    def __init__(self, backend):
        self.backend = backend
        self._items = []
        self.loaded = False

    @property
    def items(self):
        return list(self._items)

    def reload(self):
        """
        Re-fetch all categories.

        On failure the error is logged and the previous snapshot is kept.
        Returns True when the snapshot was replaced.
        """
        try:
            items = fetch_all_content(self.backend)
        except BackendError:
            logger.exception("Error fetching content")
            return False
        self._items = items
        self.loaded = True
        logger.debug("Loaded %d content items", len(items))
        return True

    def ensure_loaded(self):
        if not self.loaded:
            self.reload()
        return self.items

    def by_category(self, category):
        return [item for item in self._items if item.type == category]

    def counts(self):
        return {category: len(self.by_category(category)) for category in CATEGORIES}
