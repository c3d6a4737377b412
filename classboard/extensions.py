"""Flask extension instances, initialized in the application factory."""
from authlib.integrations.flask_client import OAuth
from flask_babel import Babel

babel = Babel()
oauth = OAuth()


def setup_oauth(app):
    oauth.init_app(app)
    oauth.register(
        name='google',
        client_id=app.config.get('GOOGLE_CLIENT_ID'),
        client_secret=app.config.get('GOOGLE_CLIENT_SECRET'),
        server_metadata_url='https://accounts.google.com/.well-known/openid-configuration',
        client_kwargs={'scope': 'openid email profile'},
    )
