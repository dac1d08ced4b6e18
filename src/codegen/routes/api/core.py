"""
Core API routes
===============

Health check and the catalog of selectable languages. Both keep the bare JSON
shape the browser front-end reads.
"""

from flask import Blueprint, jsonify

from codegen.constants import SUPPORTED_LANGUAGES
from codegen.services.generation import get_generation_service
from codegen.services.language_templates import has_template
from codegen.utils.time import utc_now_iso

core_bp = Blueprint('core_api', __name__)


@core_bp.route('/health')
def api_health():
    """Liveness probe."""
    return jsonify({
        'status': 'OK',
        'timestamp': utc_now_iso(),
        'remote_generation': get_generation_service().remote_enabled,
    })


@core_bp.route('/languages')
def api_languages():
    """Selectable target languages in catalog order."""
    return jsonify([
        {
            'value': info.value,
            'label': info.label,
            'extension': info.extension,
            'has_template': has_template(info.value),
        }
        for info in SUPPORTED_LANGUAGES.values()
    ])
