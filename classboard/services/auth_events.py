"""Auth state changes as an explicit stream with subscribe/unsubscribe."""
import logging
import threading

logger = logging.getLogger(__name__)


class Subscription:
    def __init__(self, stream, listener):
        self._stream = stream
        self._listener = listener
        self.active = True

    def unsubscribe(self):
        if self.active:
            self._stream._remove(self._listener)
            self.active = False


class AuthStateStream:
    """
    Publishes the signed-in user (or None on sign-out) to every listener.

    Listeners are called in subscription order. A listener that raises is
    logged and does not stop delivery to the others.
    """

    def __init__(self):
        self._listeners = []
        self._lock = threading.Lock()

    def subscribe(self, listener):
        with self._lock:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def _remove(self, listener):
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def listener_count(self):
        return len(self._listeners)

    def publish(self, user):
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(user)
            except Exception:
                logger.exception("Auth state listener failed")


def log_auth_change(user):
    if user is None:
        logger.info("User signed out")
    elif user.is_admin:
        logger.info("Admin signed in: %s", user.email)
    else:
        logger.info("User signed in without admin access: %s", user.email)
