"""
API Routes Package
==================

API routes organized by domain:
- core: health check and the language catalog
- generation: code generation
- analysis: prompt analysis, enhancement and language hints
- history: stored generation history

All of them are nested under the ``api`` orchestrator blueprint, which the
factory mounts at ``/api``.
"""

from flask import Blueprint

from .core import core_bp
from .generation import generation_bp
from .analysis import analysis_bp
from .history import history_bp

api_bp = Blueprint('api', __name__)
api_bp.register_blueprint(core_bp)
api_bp.register_blueprint(generation_bp)
api_bp.register_blueprint(analysis_bp)
api_bp.register_blueprint(history_bp, url_prefix='/history')

__all__ = [
    'api_bp',
    'core_bp',
    'generation_bp',
    'analysis_bp',
    'history_bp',
]
