"""
Classboard - Application Factory
"""
import logging
import os

import click
from flask import Flask, current_app, request

from classboard.extensions import babel, setup_oauth
from classboard.routes import register_blueprints
from classboard.routes.auth import get_current_user
from classboard.services.aggregator import ContentAggregator
from classboard.services.auth_events import AuthStateStream, log_auth_change
from classboard.services.backend import create_backend
from classboard.services.content import ContentService
from classboard.services.search import highlight, matched_fields_text
from classboard.utils import file_icon, format_date
from config.settings import config

logger = logging.getLogger(__name__)


def get_locale():
    """Determine the best locale for the user."""
    languages = current_app.config['LANGUAGES']
    lang = request.cookies.get('babel_translation')
    if lang in languages:
        return lang
    return request.accept_languages.best_match(languages)


def configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    logging.getLogger('classboard').setLevel(level)


def create_app(config_name=None, backend=None):
    """
    Application Factory.

    ``backend`` overrides the backend named by ``CONTENT_BACKEND``.
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    configure_logging(app)

    # Initialize extensions
    babel.init_app(app, locale_selector=get_locale)
    setup_oauth(app)

    # Backend and services
    if backend is None:
        backend = create_backend(app.config)
    aggregator = ContentAggregator(backend)
    auth_stream = AuthStateStream()
    app.extensions['classboard.backend'] = backend
    app.extensions['classboard.aggregator'] = aggregator
    app.extensions['classboard.content'] = ContentService(backend, aggregator)
    app.extensions['classboard.auth_stream'] = auth_stream
    app.extensions['classboard.auth_subscription'] = auth_stream.subscribe(log_auth_change)

    if not app.config['ADMIN_EMAILS']:
        logger.warning("ADMIN_EMAILS is empty; nobody can reach /admin")

    # Template helpers
    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.filters['file_icon'] = file_icon
    app.jinja_env.filters['highlight'] = highlight
    app.jinja_env.filters['matched_fields'] = matched_fields_text

    @app.context_processor
    def inject_conf_var():
        return dict(get_locale=get_locale, current_user=get_current_user())

    # Register blueprints
    register_blueprints(app)

    # CLI Commands
    register_cli_commands(app)

    return app


def register_cli_commands(app):
    """Register CLI commands."""

    @app.cli.command("list-content")
    def list_content_command():
        """Prints how many items each category holds."""
        aggregator = app.extensions['classboard.aggregator']
        if not aggregator.reload():
            raise click.ClickException("Could not fetch content, see the log for details.")
        for category, count in aggregator.counts().items():
            click.echo(f"{category}: {count}")

    @app.cli.command("search")
    @click.argument("query", nargs=-1, required=True)
    def search_command(query):
        """Runs a relevance search and prints the ranked results."""
        from classboard.services.search import search
        aggregator = app.extensions['classboard.aggregator']
        if not aggregator.reload():
            raise click.ClickException("Could not fetch content, see the log for details.")
        results = search(aggregator.items, ' '.join(query))
        if not results:
            click.echo("No results.")
        for result in results:
            click.echo(f"{result.relevance_score:3d}  [{result.type}] {result.display_name}"
                       f"  ({matched_fields_text(result.matched_fields)})")
