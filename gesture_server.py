#!/usr/bin/env python3
"""Gesture Server - JSON web service for unistroke recognition.

Example:
    Run on the default port::

        $ python3 gesture_server.py

    Listen on all interfaces with debug logging::

        $ python3 gesture_server.py --host 0.0.0.0 --log-level DEBUG
"""

import argparse

from gesture_flask import DEFAULT_HOST, DEFAULT_PORT, app, configure_logging
import gesture_routes  # noqa: F401 - registers routes


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Serve unistroke gesture recognition over HTTP')
    parser.add_argument('--host', default=DEFAULT_HOST, help='Bind address')
    parser.add_argument('--port', type=int, default=DEFAULT_PORT, help='Port to listen on')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')
    parser.add_argument('--debug', action='store_true', help='Enable Flask debug mode')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)
    app.run(debug=args.debug, host=args.host, port=args.port, threaded=True)


if __name__ == '__main__':
    main()
