"""Authentication routes and decorators."""
import logging
from functools import wraps

from authlib.integrations.base_client.errors import OAuthError
from flask import Blueprint, abort, current_app, flash, redirect, render_template, session, url_for
from flask_babel import gettext as _
from requests.exceptions import RequestException

from classboard.extensions import oauth
from classboard.models import User
from classboard.services import get_auth_stream

auth_bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)

SESSION_USER_KEY = 'user'


def get_current_user():
    return User.from_session(session.get(SESSION_USER_KEY))


# ==================== Decorators ====================

def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if get_current_user() is None:
            return render_template('auth/login.html'), 401
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if not get_current_user().is_admin:
            abort(403)  # Forbidden
        return f(*args, **kwargs)
    return decorated_function


# ==================== Routes ====================

@auth_bp.route('/login')
def login():
    redirect_uri = url_for('auth.authorize', _external=True)
    return oauth.google.authorize_redirect(redirect_uri)


@auth_bp.route('/authorize')
def authorize():
    try:
        token = oauth.google.authorize_access_token()
        userinfo = token.get('userinfo') or oauth.google.userinfo()
    except (OAuthError, RequestException):
        logger.exception("Login error")
        flash(_('Login failed. Please try again.'), 'error')
        return redirect('/')

    user = User.from_userinfo(userinfo, current_app.config['ADMIN_EMAILS'])
    session[SESSION_USER_KEY] = user.to_session()
    get_auth_stream().publish(user)

    if not user.is_admin:
        flash(_('This account is not authorized to manage content.'), 'error')
        return redirect('/')
    return redirect(url_for('admin.dashboard'))


@auth_bp.route('/logout')
def logout():
    session.pop(SESSION_USER_KEY, None)
    get_auth_stream().publish(None)
    return redirect('/')
