"""Date parsing and display helpers shared by services and templates."""
from datetime import datetime, timezone


def parse_iso_date(value):
    """Parse an ISO-8601 string into an aware UTC datetime, or None."""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def utc_now_iso():
    """Current time as an ISO string with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f'{now.microsecond // 1000:03d}Z'


def format_date(value):
    """'Oct 19, 2026' style date, or the raw value when it can't be parsed."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return value or ''
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def file_icon(kind):
    kind = (kind or '').lower()
    if kind == 'pdf' or kind.endswith('/pdf'):
        return 'bi-file-earmark-pdf'
    if kind in ('ppt', 'pptx') or 'presentation' in kind or 'powerpoint' in kind:
        return 'bi-file-earmark-slides'
    if kind in ('doc', 'docx') or 'word' in kind:
        return 'bi-file-earmark-word'
    if kind in ('link', 'links'):
        return 'bi-link-45deg'
    if kind in ('assignment', 'assignments'):
        return 'bi-clipboard-check'
    if kind in ('announcement', 'announcements'):
        return 'bi-megaphone'
    return 'bi-folder'
