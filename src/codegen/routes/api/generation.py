"""
Generation API routes
=====================

``POST /api/generate`` turns ``{prompt, language}`` into a generation result.
The remote completion call and its template fallback live in
`codegen.services.generation`; this route only validates input, drives the
coroutine and records the result in the history store.
"""

import logging

from flask import Blueprint, current_app, jsonify

from codegen.routes.response_utils import get_json_body, require_json_fields
from codegen.services.generation import get_generation_service
from codegen.services.history_service import get_history_service
from codegen.services.prompt_analyzer import analyze_prompt
from codegen.services.service_base import OperationError
from codegen.utils.async_utils import run_async_safely

logger = logging.getLogger(__name__)

generation_bp = Blueprint('generation_api', __name__)

MISSING_INPUT_MESSAGE = "Prompt and language are required"


@generation_bp.route('/generate', methods=['POST'])
def generate():
    """Generate code; always 200 for valid input, whatever the remote API does."""
    fields = require_json_fields(get_json_body(), 'prompt', 'language', message=MISSING_INPUT_MESSAGE)
    prompt, language = fields['prompt'], fields['language']

    result = run_async_safely(get_generation_service().generate_code(prompt, language))
    logger.info(f"Generated {language} code ({result.source}) for prompt of {len(prompt)} chars")

    if current_app.config.get('HISTORY_ENABLED', True):
        try:
            get_history_service().add(result, analysis=analyze_prompt(prompt).to_dict())
        except OperationError as e:
            # The caller still gets the generated code
            logger.error(f"Failed to record generation {result.id} in history: {e}")

    return jsonify(result.to_dict())
