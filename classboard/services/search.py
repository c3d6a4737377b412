"""
Relevance search over the aggregated content.

A linear scan with additive scoring per query term; fine for course-material
sized collections, not meant as an index.
"""
import re
from datetime import date, datetime, timezone

from markupsafe import Markup, escape

from classboard.models import SearchResult
from classboard.utils import parse_iso_date

TITLE_PREFIX_SCORE = 10
TITLE_SCORE = 5
CONTENT_SCORE = 3
UPLOADER_SCORE = 2
TYPE_SCORE = 1
FILE_NAME_SCORE = 4
URL_SCORE = 2

RECENT_WEEK_BOOST = 1
RECENT_DAY_BOOST = 2

MAX_SUGGESTIONS = 5
MIN_SUGGESTION_QUERY = 2

MATCHED_FIELD_LABELS = {
    'title': 'Title',
    'content': 'Content',
    'uploader': 'Uploader',
    'type': 'Type',
    'fileName': 'File Name',
    'url': 'URL',
}


def query_terms(query):
    """Lowercase whitespace-separated terms, each kept once, in query order."""
    terms = []
    for term in (query or '').lower().split():
        if term not in terms:
            terms.append(term)
    return terms


def recency_boost(item_date, now=None):
    uploaded = parse_iso_date(item_date)
    if uploaded is None:
        return 0
    now = now or datetime.now(timezone.utc)
    days = (now - uploaded).total_seconds() / 86400
    boost = 0
    if days < 7:
        boost += RECENT_WEEK_BOOST
    if days < 1:
        boost += RECENT_DAY_BOOST
    return boost


def calculate_relevance(item, query, now=None):
    """Return ``(score, matched_fields)`` for one item against a query."""
    terms = query_terms(query)
    if not terms:
        return 0, []

    score = 0
    matched = []

    def match(field, points):
        nonlocal score
        score += points
        if field not in matched:
            matched.append(field)

    title = item.display_name.lower()
    content = (item.content or '').lower()
    uploader = (item.uploaded_by or '').lower()
    category = (item.type or '').lower()
    file_name = (item.file_name or '').lower()
    url = (item.url or '').lower()

    for term in terms:
        if term in title:
            match('title', TITLE_PREFIX_SCORE if title.startswith(term) else TITLE_SCORE)
        if term in content:
            match('content', CONTENT_SCORE)
        if term in uploader:
            match('uploader', UPLOADER_SCORE)
        if term in category:
            match('type', TYPE_SCORE)
        if term in file_name:
            match('fileName', FILE_NAME_SCORE)
        if term in url:
            match('url', URL_SCORE)

    score += recency_boost(item.date, now)
    return score, matched


def search(items, query, now=None):
    """Ranked results for a query; items scoring 0 are left out."""
    if not (query or '').strip():
        return []
    now = now or datetime.now(timezone.utc)
    results = []
    for item in items:
        score, matched = calculate_relevance(item, query, now)
        if score > 0:
            results.append(SearchResult(item, score, matched))
    # sorted() is stable, so ties keep encounter order
    return sorted(results, key=lambda r: r.relevance_score, reverse=True)


def results_by_type(results, category):
    return [r for r in results if r.type == category]


def _as_date(value):
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def filter_results(results, type=None, uploader=None, date_from=None, date_to=None):
    """Advanced filters: category, uploader substring, inclusive date range."""
    uploader = (uploader or '').strip().lower()
    start = _as_date(date_from)
    end = _as_date(date_to)
    filtered = []
    for result in results:
        if type and type != 'all' and result.type != type:
            continue
        if uploader and uploader not in (result.uploaded_by or '').lower():
            continue
        if start or end:
            uploaded = parse_iso_date(result.date)
            if uploaded is None:
                continue
            if start and uploaded.date() < start:
                continue
            if end and uploaded.date() > end:
                continue
        filtered.append(result)
    return filtered


def search_suggestions(items, query, limit=MAX_SUGGESTIONS):
    """
    Distinct titles, uploaders and categories containing the query.

    Strings exactly equal to the query are skipped. Queries shorter than two
    characters get no suggestions.
    """
    needle = (query or '').strip().lower()
    if len(needle) < MIN_SUGGESTION_QUERY:
        return []
    suggestions = []
    for item in items:
        for candidate in (item.display_name, item.uploaded_by, item.type):
            if not candidate:
                continue
            lowered = candidate.lower()
            if needle in lowered and lowered != needle and candidate not in suggestions:
                suggestions.append(candidate)
                if len(suggestions) >= limit:
                    return suggestions
    return suggestions


def matched_fields_text(fields):
    return ', '.join(MATCHED_FIELD_LABELS.get(f, f) for f in fields)


def highlight(text, query):
    """Escape ``text`` and wrap every case-insensitive term match in <mark>."""
    text = text or ''
    terms = query_terms(query)
    if not terms:
        return escape(text)
    pattern = re.compile(
        '|'.join(re.escape(t) for t in sorted(terms, key=len, reverse=True)),
        re.IGNORECASE,
    )
    parts = []
    last = 0
    for m in pattern.finditer(text):
        parts.append(escape(text[last:m.start()]))
        parts.append(Markup('<mark>%s</mark>') % m.group(0))
        last = m.end()
    parts.append(escape(text[last:]))
    return Markup('').join(parts)
