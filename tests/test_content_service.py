"""Admin content operations against the in-memory backend."""
import io

import pytest
from flask_babel.speaklater import LazyString
from werkzeug.datastructures import FileStorage

from classboard.errors import BackendError, ValidationError
from classboard.models import User
from classboard.services.aggregator import ContentAggregator
from classboard.services.backend import InMemoryBackend
from classboard.services.content import ContentService, blob_path

PROF = User(uid='1', email='admin@example.com', display_name='Prof X', is_admin=True)


@pytest.fixture
def service(backend):
    return ContentService(backend, ContentAggregator(backend))


def upload(name='intro.pdf', data=b'%PDF-1.4', mimetype='application/pdf'):
    return FileStorage(stream=io.BytesIO(data), filename=name, content_type=mimetype)


def test_blob_path_uses_category_timestamp_and_safe_name():
    assert blob_path('slides', '../Week 1.pdf', timestamp_ms=1700000000000) == 'slides/1700000000000_Week_1.pdf'


def test_upload_writes_blob_then_metadata(service, backend):
    item_id = service.upload_file('assignments', 'Midterm', upload(), '2026-11-01', PROF)

    (path, data), = backend.blobs.items()
    assert path.startswith('assignments/') and path.endswith('_intro.pdf')
    assert data == b'%PDF-1.4'

    record = backend.collections['assignments'][item_id]
    assert record['name'] == 'Midterm'
    assert record['fileName'] == 'intro.pdf'
    assert record['fileUrl'] == f'{backend.base_url}/{path}'
    assert record['uploadedBy'] == 'Prof X'
    assert record['dueDate'] == '2026-11-01'
    assert record['type'] == 'application/pdf'
    assert [i.id for i in service.aggregator.items] == [item_id]


@pytest.mark.parametrize('category,title,file', [
    ('links', 'Title', upload()),
    ('slides', '  ', upload()),
    ('slides', 'Title', None),
])
def test_upload_validation(service, backend, category, title, file):
    with pytest.raises(ValidationError):
        service.upload_file(category, title, file, '', PROF)
    assert backend.blobs == {}


def test_add_link_and_announcement(service, backend):
    link_id = service.add_link('Docs', 'https://docs.python.org', 'Reference', PROF)
    post_id = service.post_announcement('Exam moved', 'Friday instead', PROF)
    assert backend.collections['links'][link_id]['url'] == 'https://docs.python.org'
    assert backend.collections['links'][link_id]['content'] == 'Reference'
    assert backend.collections['announcements'][post_id]['title'] == 'Exam moved'
    assert {i.type for i in service.aggregator.items} == {'links', 'announcements'}


def test_link_requires_url(service):
    with pytest.raises(ValidationError):
        service.add_link('Docs', '', '', PROF)


def test_announcement_requires_content(service):
    with pytest.raises(ValidationError):
        service.post_announcement('Title', '', PROF)


def test_delete(service, backend):
    item_id = service.post_announcement('Exam moved', 'Friday instead', PROF)
    service.delete_item('announcements', item_id)
    assert backend.collections['announcements'] == {}
    assert service.aggregator.items == []


def test_delete_missing_item_raises_backend_error(service):
    with pytest.raises(BackendError):
        service.delete_item('slides', 'does-not-exist')


def test_delete_unknown_category(service):
    with pytest.raises(ValidationError):
        service.delete_item('grades', 'x')


@pytest.mark.parametrize('url', [
    'javascript:alert(1)',
    '  JavaScript:alert(document.cookie)',
    'data:text/html,<script>alert(1)</script>',
    'ftp://files.example.org/notes.pdf',
    'docs.python.org',
])
def test_link_rejects_non_web_urls(service, backend, url):
    with pytest.raises(ValidationError):
        service.add_link('Docs', url, '', PROF)
    assert backend.collections.get('links', {}) == {}


def test_validation_messages_are_translatable(service):
    with pytest.raises(ValidationError) as excinfo:
        service.post_announcement('', 'Friday instead', PROF)
    assert isinstance(excinfo.value.args[0], LazyString)


class InsertFailsBackend(InMemoryBackend):
    def insert(self, category, data):
        raise BackendError('metadata write refused')


def test_failed_metadata_write_leaves_blob_and_keeps_snapshot():
    backend = InsertFailsBackend()
    backend.collections['slides'] = {
        's1': {'name': 'Week 1', 'uploadedBy': 'Prof X', 'date': '2026-10-01T09:00:00Z'},
    }
    service = ContentService(backend, ContentAggregator(backend))
    service.aggregator.reload()
    before = service.aggregator.items

    with pytest.raises(BackendError):
        service.upload_file('slides', 'Week 2', upload('week2.pdf'), '', PROF)

    # the blob write is not rolled back
    (path,) = backend.blobs
    assert path.startswith('slides/') and path.endswith('_week2.pdf')
    assert service.aggregator.items == before
    assert [i.id for i in service.aggregator.items] == ['s1']
