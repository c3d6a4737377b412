"""Admin content operations: upload, add link, post announcement, delete."""
import logging
import time
from urllib.parse import urlparse

from flask_babel import lazy_gettext as _l
from werkzeug.utils import secure_filename

from classboard.errors import ValidationError
from classboard.models import ANNOUNCEMENTS, CATEGORIES, FILE_CATEGORIES, LINKS, new_record
from classboard.utils import utc_now_iso

logger = logging.getLogger(__name__)


def _required(value, message):
    value = (value or '').strip()
    if not value:
        raise ValidationError(message)
    return value


def _web_url(value):
    url = _required(value, _l('URL is required.'))
    parsed = urlparse(url)
    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        raise ValidationError(_l('URL must start with http:// or https://.'))
    return url


def blob_path(category, filename, timestamp_ms=None):
    """Storage path for an uploaded file: ``{category}/{timestamp}_{filename}``."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    safe_name = secure_filename(filename) or 'upload'
    return f'{category}/{timestamp_ms}_{safe_name}'


class ContentService:
    """
    Each operation validates its input, performs a single backend write (an
    upload is a blob write followed by one metadata write, not atomic) and
    then reloads the aggregator. Backend failures propagate as BackendError.
    """

    def __init__(self, backend, aggregator):
        self.backend = backend
        self.aggregator = aggregator

    def upload_file(self, category, title, file, due_date, user):
        if category not in FILE_CATEGORIES:
            raise ValidationError(_l('Files can only be uploaded to slides or assignments.'))
        title = _required(title, _l('Title is required.'))
        if file is None or not file.filename:
            raise ValidationError(_l('Please choose a file to upload.'))

        path = blob_path(category, file.filename)
        file_url = self.backend.upload_blob(path, file.stream, file.mimetype)
        # A failure past this point leaves the uploaded blob unreferenced
        record = new_record(
            user.display_name, utc_now_iso(),
            name=title,
            file_name=file.filename,
            file_url=file_url,
            due_date=(due_date or '').strip() or None,
            type=file.mimetype,
        )
        item_id = self.backend.insert(category, record)
        logger.info("Uploaded %s to %s as %s", file.filename, category, item_id)
        self.aggregator.reload()
        return item_id

    def add_link(self, title, url, description, user):
        title = _required(title, _l('Title is required.'))
        url = _web_url(url)
        record = new_record(
            user.display_name, utc_now_iso(),
            name=title, url=url, content=(description or '').strip(), type='link',
        )
        item_id = self.backend.insert(LINKS, record)
        logger.info("Added link %s", item_id)
        self.aggregator.reload()
        return item_id

    def post_announcement(self, title, content, user):
        title = _required(title, _l('Title is required.'))
        content = _required(content, _l('Content is required.'))
        record = new_record(
            user.display_name, utc_now_iso(),
            title=title, content=content, type='announcement',
        )
        item_id = self.backend.insert(ANNOUNCEMENTS, record)
        logger.info("Posted announcement %s", item_id)
        self.aggregator.reload()
        return item_id

    def delete_item(self, category, item_id):
        if category not in CATEGORIES:
            raise ValidationError(_l('Unknown category: %(category)s', category=category))
        self.backend.delete(category, item_id)
        logger.info("Deleted %s/%s", category, item_id)
        self.aggregator.reload()
