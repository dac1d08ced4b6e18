"""
Analysis API routes
===================

Prompt analysis helpers backing the front-end's language auto-detection.
"""

from flask import Blueprint

from codegen.routes.response_utils import get_json_body, handle_exceptions, json_success, require_json_fields
from codegen.services.prompt_analyzer import (
    analyze_prompt,
    enhance_prompt,
    get_framework_suggestions,
    get_language_hints,
)
from codegen.services.service_base import ValidationError

analysis_bp = Blueprint('analysis_api', __name__)


@analysis_bp.route('/analyze', methods=['POST'])
@handle_exceptions
def analyze():
    """Rank languages for a prompt and add frameworks and hints for the best one."""
    prompt = get_json_body().get('prompt', '')
    if not isinstance(prompt, str):
        raise ValidationError("prompt must be a string")

    result = analyze_prompt(prompt)
    data = result.to_dict()
    data['frameworks'] = get_framework_suggestions(result.primary_suggestion, prompt)
    data['hints'] = get_language_hints(result.primary_suggestion)
    return json_success(data)


@analysis_bp.route('/enhance', methods=['POST'])
@handle_exceptions
def enhance():
    payload = get_json_body()
    fields = require_json_fields(payload, 'prompt', 'language')
    frameworks = payload.get('frameworks') or []
    if not isinstance(frameworks, list) or not all(isinstance(f, str) for f in frameworks):
        raise ValidationError("frameworks must be a list of strings")
    return json_success({'prompt': enhance_prompt(fields['prompt'], fields['language'], frameworks)})


@analysis_bp.route('/languages/<language>/hints')
@handle_exceptions
def language_hints(language: str):
    return json_success({'language': language, 'hints': get_language_hints(language)})
