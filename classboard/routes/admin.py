"""Admin routes - dashboard and content management."""
import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for
from flask_babel import gettext as _

from classboard.errors import BackendError, ValidationError
from classboard.models import FILE_CATEGORIES, FOLDERS
from classboard.routes.auth import admin_required, get_current_user
from classboard.services import get_aggregator, get_content_service

admin_bp = Blueprint('admin', __name__)
logger = logging.getLogger(__name__)

TABS = ['upload', 'manage', 'announcements']


def filter_content(items, query):
    """Plain substring filter used by the manage tab."""
    needle = (query or '').strip().lower()
    if not needle:
        return items
    return [
        item for item in items
        if needle in item.display_name.lower()
        or needle in (item.content or '').lower()
        or needle in (item.uploaded_by or '').lower()
        or needle in item.type.lower()
    ]


def _run(action, success_message, failure_message, tab):
    """Run one content operation and flash a pass/fail message."""
    try:
        action()
    except ValidationError as e:
        logger.warning("Rejected admin submission: %s", e)
        flash(str(e), 'error')
    except BackendError:
        logger.exception(failure_message)
        flash(failure_message, 'error')
    else:
        flash(success_message, 'success')
    return redirect(url_for('admin.dashboard', tab=tab))


@admin_bp.route('/admin')
@admin_required
def dashboard():
    tab = request.args.get('tab', 'upload')
    if tab not in TABS:
        tab = 'upload'
    query = request.args.get('q', '')

    aggregator = get_aggregator()
    aggregator.reload()
    content = filter_content(aggregator.items, query)

    return render_template(
        'admin/dashboard.html',
        user=get_current_user(),
        tab=tab,
        tabs=TABS,
        query=query,
        content=content,
        folders=FOLDERS,
        file_categories=FILE_CATEGORIES,
    )


@admin_bp.route('/admin/upload', methods=['POST'])
@admin_required
def upload_file():
    service = get_content_service()
    return _run(
        lambda: service.upload_file(
            request.form.get('category', ''),
            request.form.get('title'),
            request.files.get('file'),
            request.form.get('due_date'),
            get_current_user(),
        ),
        _('File uploaded successfully!'),
        _('Error uploading file. Please try again.'),
        'upload',
    )


@admin_bp.route('/admin/links', methods=['POST'])
@admin_required
def add_link():
    service = get_content_service()
    return _run(
        lambda: service.add_link(
            request.form.get('title'),
            request.form.get('url'),
            request.form.get('description'),
            get_current_user(),
        ),
        _('Link added successfully!'),
        _('Error adding link. Please try again.'),
        'upload',
    )


@admin_bp.route('/admin/announcements', methods=['POST'])
@admin_required
def post_announcement():
    service = get_content_service()
    return _run(
        lambda: service.post_announcement(
            request.form.get('title'),
            request.form.get('content'),
            get_current_user(),
        ),
        _('Announcement posted successfully!'),
        _('Error posting announcement. Please try again.'),
        'announcements',
    )


@admin_bp.route('/admin/<category>/<item_id>/delete', methods=['POST'])
@admin_required
def delete_item(category, item_id):
    service = get_content_service()
    return _run(
        lambda: service.delete_item(category, item_id),
        _('Item deleted successfully!'),
        _('Error deleting item. Please try again.'),
        'manage',
    )
