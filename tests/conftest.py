"""Pytest fixtures: an app wired to the in-memory backend and signed-in clients."""
from datetime import datetime, timedelta, timezone

import pytest

from classboard import create_app
from classboard.models import ContentItem
from classboard.services.backend import InMemoryBackend

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

ADMIN = {'uid': 'admin-1', 'email': 'admin@example.com', 'display_name': 'Prof X', 'is_admin': True}
STUDENT = {'uid': 'student-1', 'email': 'student@example.com', 'display_name': 'Student', 'is_admin': False}


def iso(moment):
    return moment.isoformat().replace('+00:00', 'Z')


def days_ago(days, now=NOW):
    return iso(now - timedelta(days=days))


def make_item(item_id='1', type='slides', **fields):
    fields.setdefault('uploaded_by', 'Prof X')
    fields.setdefault('date', days_ago(30))
    return ContentItem(id=item_id, type=type, **fields)


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def app(backend):
    app = create_app('testing', backend=backend)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['user'] = dict(ADMIN)
    return client


@pytest.fixture
def student_client(client):
    with client.session_transaction() as sess:
        sess['user'] = dict(STUDENT)
    return client


@pytest.fixture
def seeded(backend):
    """A few documents across every category, dates relative to the real clock."""
    now = datetime.now(timezone.utc)
    ids = {}
    ids['slides'] = backend.insert('slides', {
        'name': 'Week 1 Introduction', 'fileName': 'intro.pdf', 'fileUrl': 'https://files.test/intro.pdf',
        'uploadedBy': 'Prof X', 'date': days_ago(10, now), 'type': 'application/pdf',
    })
    ids['assignments'] = backend.insert('assignments', {
        'name': 'Midterm Assignment', 'fileName': 'midterm.docx', 'fileUrl': 'https://files.test/midterm.docx',
        'uploadedBy': 'Prof X', 'date': days_ago(2, now), 'dueDate': '2026-11-01',
    })
    ids['links'] = backend.insert('links', {
        'name': 'Python Docs', 'url': 'https://docs.python.org', 'content': 'Official reference',
        'uploadedby': 'Dr Y', 'date': days_ago(20, now), 'type': 'link',
    })
    ids['announcements'] = backend.insert('announcements', {
        'title': 'Exam moved', 'content': 'The midterm exam moves to Friday',
        'uploadedBy': 'Prof X', 'date': days_ago(0.1, now), 'type': 'announcement',
    })
    return ids
