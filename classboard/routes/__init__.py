"""Routes package - Blueprint registration."""
from classboard.routes.main import main_bp
from classboard.routes.auth import auth_bp
from classboard.routes.search import search_bp
from classboard.routes.admin import admin_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(search_bp)
    app.register_blueprint(admin_bp)
