"""Service accessors bound to the current Flask app."""
from flask import current_app


def get_backend():
    return current_app.extensions['classboard.backend']


def get_aggregator():
    return current_app.extensions['classboard.aggregator']


def get_content_service():
    return current_app.extensions['classboard.content']


def get_auth_stream():
    return current_app.extensions['classboard.auth_stream']
