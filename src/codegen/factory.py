"""
Flask Application Factory
========================

Application factory pattern for the AI code generator service.
"""

import logging
import os
import time
from pathlib import Path

from flask import Flask, g, request

from codegen.extensions import init_db, init_extensions
from codegen.utils.logging_config import APP_LOGGER_NAME, get_logger

logger = get_logger('factory')


def create_app(config_name: str = 'default') -> Flask:
    """
    Create and configure Flask application.

    Args:
        config_name: Configuration environment name

    Returns:
        Configured Flask application
    """
    # Load .env before settings are imported: the config classes read the
    # environment at import time
    project_root = Path(__file__).resolve().parent.parent.parent
    env_path = project_root / '.env'
    from dotenv import load_dotenv
    if env_path.exists():
        load_dotenv(env_path, override=False)
        logger.info(f"Loaded .env from {env_path}")
    else:
        logger.debug(f".env not found at {env_path}")

    from codegen.config.settings import get_config
    config_cls = get_config(config_name)

    app = Flask(__name__)
    app.config.from_object(config_cls)
    app.json.sort_keys = False  # type: ignore[attr-defined]

    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and ':memory:' not in app.config['SQLALCHEMY_DATABASE_URI']:
        db_file = Path(app.config['SQLALCHEMY_DATABASE_URI'][len('sqlite:///'):])
        db_file.parent.mkdir(parents=True, exist_ok=True)

    # Apply LOG_LEVEL to the app logger tree
    _lvl = app.config.get('LOG_LEVEL')
    if _lvl:
        logging.getLogger(APP_LOGGER_NAME).setLevel(getattr(logging, _lvl.upper(), logging.INFO))

    init_extensions(app)

    with app.app_context():
        init_db()
        logger.info("Database tables ensured")

    from codegen.services.generation import init_generation_service
    service = init_generation_service(app)
    if service.remote_enabled:
        logger.info(f"Remote generation enabled (model={service.chat_service.model})")
    else:
        logger.info("Remote generation disabled, serving template fallbacks")

    from codegen.routes import register_blueprints
    register_blueprints(app)

    from codegen.errors import register_error_handlers
    register_error_handlers(app)

    # Request / Response logging middleware (after error handlers so request_id is present)
    @app.before_request  # type: ignore[misc]
    def _req_start_timer():
        g._req_start = time.perf_counter()

    @app.after_request  # type: ignore[misc]
    def _log_response(resp):
        duration_ms = None
        if hasattr(g, '_req_start'):
            duration_ms = (time.perf_counter() - g._req_start) * 1000.0
        logger.info(
            f"{request.method} {request.path} -> {resp.status_code}",
            extra={
                'event': 'http_request',
                'request_id': getattr(g, 'request_id', None),
                'method': request.method,
                'path': request.path,
                'status': resp.status_code,
                'duration_ms': round(duration_ms, 2) if duration_ms is not None else None,
            }
        )
        return resp

    logger.info(f"Flask application created successfully with config: {config_name} (pid {os.getpid()})")
    return app
