"""
Content backend abstraction: Firebase (Firestore + Cloud Storage) and an
in-memory implementation for development and tests.
"""
from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional, Protocol, Tuple

import firebase_admin
from firebase_admin import credentials, firestore, storage
from firebase_admin.exceptions import FirebaseError
from google.api_core.exceptions import GoogleAPICallError

from classboard.errors import BackendError

logger = logging.getLogger(__name__)

Record = Tuple[str, dict]


class ContentBackend(Protocol):
    """Operations the portal needs from the hosted backend."""

    def fetch_category(self, category: str) -> List[Record]:
        """All documents of a category, newest first, as (id, data) pairs."""
        ...

    def fetch_recent(self, category: str, limit: int) -> List[Record]:
        ...

    def insert(self, category: str, data: dict) -> str:
        """Store a new document and return its id."""
        ...

    def delete(self, category: str, item_id: str) -> None:
        ...

    def upload_blob(self, path: str, stream, content_type: Optional[str] = None) -> str:
        """Upload a file and return its public URL."""
        ...


class InMemoryBackend:
    """Dictionary-backed backend used in development and tests."""

    def __init__(self, base_url: str = 'https://storage.example.test'):
        self.base_url = base_url
        self.collections: Dict[str, Dict[str, dict]] = {}
        self.blobs: Dict[str, bytes] = {}

    def reset(self):
        self.collections.clear()
        self.blobs.clear()

    def _sorted(self, category):
        docs = self.collections.get(category, {})
        return sorted(
            ((doc_id, dict(data)) for doc_id, data in docs.items()),
            key=lambda pair: pair[1].get('date') or '',
            reverse=True,
        )

    def fetch_category(self, category: str) -> List[Record]:
        return self._sorted(category)

    def fetch_recent(self, category: str, limit: int) -> List[Record]:
        return self._sorted(category)[:limit]

    def insert(self, category: str, data: dict) -> str:
        doc_id = uuid.uuid4().hex
        self.collections.setdefault(category, {})[doc_id] = dict(data)
        return doc_id

    def delete(self, category: str, item_id: str) -> None:
        docs = self.collections.get(category, {})
        if item_id not in docs:
            raise BackendError(f'No document {item_id!r} in {category!r}')
        del docs[item_id]

    def upload_blob(self, path: str, stream, content_type: Optional[str] = None) -> str:
        self.blobs[path] = stream.read()
        return f'{self.base_url}/{path}'


class FirebaseBackend:
    """Firestore collections for documents, a Cloud Storage bucket for files."""

    def __init__(self, credentials_path: str, storage_bucket: Optional[str] = None):
        options = {'storageBucket': storage_bucket} if storage_bucket else None
        try:
            self._app = firebase_admin.get_app()
        except ValueError:
            cred = credentials.Certificate(credentials_path)
            self._app = firebase_admin.initialize_app(cred, options)
        self._db = firestore.client(app=self._app)
        self._storage_bucket = storage_bucket

    def _query(self, category, limit=None):
        query = self._db.collection(category).order_by('date', direction=firestore.Query.DESCENDING)
        if limit is not None:
            query = query.limit(limit)
        try:
            return [(doc.id, doc.to_dict() or {}) for doc in query.stream()]
        except (GoogleAPICallError, FirebaseError) as e:
            raise BackendError(f'Error fetching {category}: {e}') from e

    def fetch_category(self, category: str) -> List[Record]:
        return self._query(category)

    def fetch_recent(self, category: str, limit: int) -> List[Record]:
        return self._query(category, limit)

    def insert(self, category: str, data: dict) -> str:
        try:
            _, doc_ref = self._db.collection(category).add(data)
        except (GoogleAPICallError, FirebaseError) as e:
            raise BackendError(f'Error inserting into {category}: {e}') from e
        return doc_ref.id

    def delete(self, category: str, item_id: str) -> None:
        doc_ref = self._db.collection(category).document(item_id)
        try:
            # Firestore deletes of missing documents succeed silently
            if not doc_ref.get().exists:
                raise BackendError(f'No document {item_id!r} in {category!r}')
            doc_ref.delete()
        except (GoogleAPICallError, FirebaseError) as e:
            raise BackendError(f'Error deleting {category}/{item_id}: {e}') from e

    def upload_blob(self, path: str, stream, content_type: Optional[str] = None) -> str:
        try:
            bucket = storage.bucket(self._storage_bucket, app=self._app)
            blob = bucket.blob(path)
            blob.upload_from_file(stream, content_type=content_type)
            blob.make_public()
        except (GoogleAPICallError, FirebaseError) as e:
            raise BackendError(f'Error uploading {path}: {e}') from e
        return blob.public_url


def create_backend(app_config) -> ContentBackend:
    """Build the backend named by ``CONTENT_BACKEND``."""
    kind = app_config.get('CONTENT_BACKEND', 'firebase')
    if kind == 'memory':
        logger.info("Using in-memory content backend")
        return InMemoryBackend()
    if kind == 'firebase':
        logger.info("Using Firebase content backend")
        return FirebaseBackend(
            app_config.get('FIREBASE_CREDENTIALS_PATH'),
            app_config.get('FIREBASE_STORAGE_BUCKET'),
        )
    raise ValueError(f'Unknown CONTENT_BACKEND: {kind}')
