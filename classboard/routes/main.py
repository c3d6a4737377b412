"""Main routes - Dashboard, folders, language switching."""
import logging

from flask import Blueprint, abort, make_response, redirect, render_template, request

from classboard.errors import BackendError
from classboard.models import ANNOUNCEMENTS, CATEGORIES, ContentItem, FOLDERS
from classboard.services import get_aggregator, get_backend
from classboard.services.aggregator import fetch_category_items

main_bp = Blueprint('main', __name__)
logger = logging.getLogger(__name__)

RECENT_ANNOUNCEMENTS = 2


@main_bp.route('/')
def index():
    aggregator = get_aggregator()
    aggregator.reload()
    counts = aggregator.counts()
    folders = [dict(FOLDERS[key], key=key, count=counts[key]) for key in CATEGORIES]

    try:
        recent = [ContentItem.from_record(doc_id, data, ANNOUNCEMENTS)
                  for doc_id, data in get_backend().fetch_recent(ANNOUNCEMENTS, RECENT_ANNOUNCEMENTS)]
    except BackendError:
        logger.exception("Error fetching announcements")
        recent = []

    return render_template('index.html', folders=folders, announcements=recent)


@main_bp.route('/folder/<category>')
def folder(category):
    if category not in CATEGORIES:
        abort(404)
    try:
        items = fetch_category_items(get_backend(), category)
    except BackendError:
        logger.exception("Error fetching %s", category)
        items = []
    return render_template('folder.html', folder=dict(FOLDERS[category], key=category), items=items)


@main_bp.route('/set_language/<lang>')
def set_language(lang):
    if lang not in ['en', 'es']:
        lang = 'en'
    resp = make_response(redirect(request.referrer or '/'))
    resp.set_cookie('babel_translation', lang)
    return resp
