"""Search routes - results page, dropdown suggestions, history."""
from flask import Blueprint, current_app, jsonify, redirect, render_template, request, session, url_for

from classboard.models import CATEGORIES, FOLDERS
from classboard.services import get_aggregator
from classboard.services.history import SearchHistory
from classboard.services.search import filter_results, results_by_type, search, search_suggestions

search_bp = Blueprint('search', __name__)

DROPDOWN_RESULTS = 8


def get_history():
    return SearchHistory(session, current_app.config['SEARCH_HISTORY_KEY'])


@search_bp.route('/search')
def results():
    query = request.args.get('q', '').strip()
    filters = {
        'type': request.args.get('type', 'all'),
        'uploader': request.args.get('uploader', ''),
        'date_from': request.args.get('date_from', ''),
        'date_to': request.args.get('date_to', ''),
    }
    tab = request.args.get('tab', 'all')
    if tab != 'all' and tab not in CATEGORIES:
        tab = 'all'

    aggregator = get_aggregator()
    aggregator.reload()
    items = aggregator.items

    history = get_history()
    if query:
        history.add(query)

    matches = filter_results(search(items, query), **filters)
    grouped = {'all': matches}
    for category in CATEGORIES:
        grouped[category] = results_by_type(matches, category)

    return render_template(
        'search/results.html',
        query=query,
        filters=filters,
        tab=tab,
        grouped=grouped,
        results=grouped[tab],
        folders=FOLDERS,
        categories=CATEGORIES,
        suggestions=search_suggestions(items, query),
        history=history.entries,
    )


@search_bp.route('/search/suggest')
def suggest():
    """Dropdown data for the search box; does not touch the history."""
    query = request.args.get('q', '')
    items = get_aggregator().ensure_loaded()
    matches = search(items, query)[:DROPDOWN_RESULTS]
    return jsonify({
        'query': query,
        'results': [r.to_dict() for r in matches],
        'suggestions': search_suggestions(items, query),
        'history': get_history().entries,
    })


@search_bp.route('/search/history/clear', methods=['POST'])
def clear_history():
    get_history().clear()
    if request.accept_mimetypes.best == 'application/json':
        return jsonify({'history': []})
    return redirect(request.referrer or url_for('search.results'))
