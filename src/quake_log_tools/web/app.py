"""
Quake Log HTTP API

Serves the match reports of a Quake 3 Arena log as JSON:

    GET /matches          all matches in encounter order
    GET /matches/<name>   one match, name compared case-insensitively

Every request re-reads the log, so the API always reflects the file on disk.
"""

import argparse
import logging
from typing import Dict, Any, Optional

import requests
from flask import Flask, jsonify

from ..base import QuakeTool
from ..log import LogSource

logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None, log_path: Optional[str] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        config: Configuration dictionary from Config class
        log_path: Log file path or URL overriding paths.games_log

    Returns:
        The configured Flask app
    """
    app = Flask(__name__)
    app.config['QUAKE_CONFIG'] = config or {}
    app.config['QUAKE_LOG_PATH'] = log_path

    def _source() -> LogSource:
        return LogSource(app.config['QUAKE_CONFIG'], app.config['QUAKE_LOG_PATH'])

    # ── Routes ────────────────────────────────────────────────────────────────

    @app.route('/matches')
    def list_matches():
        reports = _source().list_matches()
        return jsonify([report.to_dict() for report in reports])

    @app.route('/matches/<name>')
    def get_match(name):
        report = _source().find_match(name)
        if report is None:
            return jsonify({'error': f"Match '{name}' not found."}), 404
        return jsonify(report.to_dict())

    # ── Errors ────────────────────────────────────────────────────────────────

    @app.errorhandler(FileNotFoundError)
    @app.errorhandler(PermissionError)
    def log_unavailable(e):
        app.logger.error('Log unavailable: %s', e)
        return jsonify({'error': str(e)}), 503

    @app.errorhandler(requests.RequestException)
    def log_fetch_failed(e):
        app.logger.error('Remote log fetch failed: %s', e)
        return jsonify({'error': 'Failed to fetch remote log'}), 502

    return app


def main():
    """Main entry point for the HTTP API."""
    parser = argparse.ArgumentParser(description="Serve Quake 3 Arena match reports over HTTP.")
    parser.add_argument("--host", help="Interface to bind (default: web.host or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: web.port or 5000)")
    parser.add_argument("--log", help="Path or URL of the log (default: paths.games_log)")

    QuakeTool.add_standard_arguments(parser)
    args = parser.parse_args()

    try:
        config = QuakeTool.load_config(args.profile)
        web_config = config.get('web', {})
        host = args.host or web_config.get('host', '127.0.0.1')
        port = args.port or int(web_config.get('port', 5000))

        app = create_app(config, args.log)
        logger.info(f"Serving match reports on http://{host}:{port}")
        app.run(host=host, port=port)
        return 0

    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == '__main__':
    import sys
    sys.exit(main())
