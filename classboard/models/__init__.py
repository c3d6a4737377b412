"""Models package - Re-exports all models for convenient importing."""
from classboard.models.content import (
    ANNOUNCEMENTS, ASSIGNMENTS, CATEGORIES, FILE_CATEGORIES, FOLDERS, LINKS, SLIDES,
    ContentItem, new_record,
)
from classboard.models.search import SearchResult
from classboard.models.user import User

__all__ = [
    'ANNOUNCEMENTS', 'ASSIGNMENTS', 'CATEGORIES', 'FILE_CATEGORIES', 'FOLDERS', 'LINKS', 'SLIDES',
    'ContentItem', 'SearchResult', 'User', 'new_record',
]
