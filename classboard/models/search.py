"""SearchResult model."""
from dataclasses import dataclass, field
from typing import List

from classboard.models.content import ContentItem


@dataclass
class SearchResult:
    item: ContentItem
    relevance_score: int
    matched_fields: List[str] = field(default_factory=list)

    def __getattr__(self, name):
        # Expose the item's fields directly (result.type, result.display_name, ...)
        if name == 'item':
            raise AttributeError(name)
        return getattr(self.item, name)

    def to_dict(self):
        data = self.item.to_dict()
        data['relevance_score'] = self.relevance_score
        data['matched_fields'] = list(self.matched_fields)
        return data
