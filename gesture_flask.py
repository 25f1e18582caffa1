"""Flask application setup and shared state for the gesture server.

This module serves as the central configuration hub for the gesture
recognition web service. It provides:

    - The Flask application instance shared across route modules
    - The process-wide GestureRecognizer the routes operate on
    - Logging configuration
    - Request validation helpers

Architecture:
    - gesture_flask.py: App instance, config, and utilities (this module)
    - gesture_routes.py: JSON routes for recognition and gesture management
    - gesture_server.py: Command-line entry point that runs the app

Example:
    Import the Flask app and the recognizer::

        from gesture_flask import app, get_recognizer

        @app.route('/my-route')
        def my_handler():
            return jsonify(total=len(get_recognizer().repository))

Attributes:
    app (Flask): The Flask application instance.
    DEFAULT_HOST (str): Default bind address for the development server.
    DEFAULT_PORT (int): Default port for the development server.
    MAX_STROKE_POINTS (int): Largest stroke accepted in a request body.
"""

import logging

from flask import Flask, jsonify

from unistroke_lib.api import GestureRecognizer, coerce_points

# Module logger
logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up logging with a consistent format across all modules. Call this
    at application startup before serving requests.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from gesture_flask import configure_logging
            configure_logging(level='DEBUG', log_file='gestures.log')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Quiet per-request access logs
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


# Flask application
app = Flask(__name__)

# --- Global constants ---
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 5000
MAX_STROKE_POINTS = 10000

# Shared recognizer; the template store inside it is lock-protected
_recognizer = GestureRecognizer()


def get_recognizer() -> GestureRecognizer:
    """Return the process-wide recognizer used by the routes."""
    return _recognizer


def validate_points_param(points) -> tuple[list | None, tuple | None]:
    """Validate a stroke from a request body.

    Args:
        points: Value of the ``points`` field, expected to be a list of
            ``[x, y]`` pairs.

    Returns:
        Tuple of (points, error_response). On success points is the list of
        Points and error_response is None. On failure points is None and
        error_response is a ``(json, 400)`` tuple ready to return.

    Example:
        Use in a route handler::

            pts, err = validate_points_param(data.get('points'))
            if err:
                return err
    """
    if points is None:
        return None, (jsonify(error="Missing 'points'"), 400)
    if not isinstance(points, list):
        return None, (jsonify(error="'points' must be a list of [x, y] pairs"), 400)
    if len(points) > MAX_STROKE_POINTS:
        return None, (jsonify(error=f"Too many points (max {MAX_STROKE_POINTS})"), 400)
    try:
        return coerce_points(points), None
    except ValueError as e:
        return None, (jsonify(error=str(e)), 400)
