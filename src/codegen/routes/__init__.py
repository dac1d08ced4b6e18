"""
Routes Package
Handles all application routes organized by type.
"""

from .api import api_bp, core_bp, generation_bp, analysis_bp, history_bp

__all__ = [
    'api_bp',
    'core_bp',
    'generation_bp',
    'analysis_bp',
    'history_bp',
    'register_blueprints',
]


def register_blueprints(app):
    """
    Register all application blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    # Main API orchestrator blueprint (nests core/generation/analysis/history)
    app.register_blueprint(api_bp, url_prefix='/api')
