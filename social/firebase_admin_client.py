"""Firebase Admin client helpers with test-safe behaviors."""

import logging
import os
import sys
import firebase_admin
from firebase_admin import credentials
from django.conf import settings

logger = logging.getLogger(__name__)


def _env_truthy(name: str, default: str = "false") -> bool:
    """Return True when env var is set to a truthy value."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _is_running_tests():
    """
    Return True when the test suite is executing.
    This prevents Firebase from attempting network calls during tests.
    """
    return any(arg in sys.argv for arg in ["test", "pytest"]) or "pytest" in sys.modules


def _should_log() -> bool:
    """Silence noisy Firebase logs during tests unless explicitly enabled."""
    return not _is_running_tests() or _env_truthy("FIREBASE_VERBOSE_TEST_LOGS")


def _load_credential():
    cred_path = getattr(settings, "FIREBASE_SERVICE_ACCOUNT_FILE", None)
    if not cred_path or not os.path.exists(cred_path):
        if _should_log():
            logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE not found. Firebase authentication disabled.")
        return None
    return credentials.Certificate(cred_path)


def _init_app(cred):
    try:
        return firebase_admin.initialize_app(cred)
    except (ValueError, OSError) as e:
        if _should_log():
            logger.error("Failed to initialize Firebase: %s", e)
        return None


_app = None


def get_app():
    """
    Lazily initialise the Firebase Admin app.
    Returns None if credentials are missing or invalid, preventing crashes.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _is_running_tests() and not _env_truthy("FIREBASE_ALLOW_TEST_APP"):
        return None

    cred = _load_credential()
    if not cred:
        return None

    _app = _init_app(cred)
    return _app
