"""
History API routes
==================

Read and prune the stored generation history (newest first).
"""

from flask import Blueprint, request

from codegen.routes.response_utils import handle_exceptions, json_success
from codegen.services.history_service import get_history_service
from codegen.services.service_base import ValidationError

history_bp = Blueprint('history_api', __name__)


@history_bp.route('', methods=['GET'])
@handle_exceptions
def list_history():
    """List entries, optionally truncated with ``?limit=N``."""
    raw_limit = request.args.get('limit')
    limit = None
    if raw_limit is not None:
        try:
            limit = int(raw_limit)
        except ValueError:
            raise ValidationError(f"Invalid limit: {raw_limit}")

    service = get_history_service()
    entries = service.list(limit=limit)
    return json_success(entries, count=len(entries), total=service.count(), capacity=service.limit)


@history_bp.route('/<entry_id>', methods=['GET'])
@handle_exceptions
def get_history_entry(entry_id: str):
    return json_success(get_history_service().get(entry_id))


@history_bp.route('/<entry_id>', methods=['DELETE'])
@handle_exceptions
def delete_history_entry(entry_id: str):
    get_history_service().delete(entry_id)
    return json_success({'id': entry_id}, message="History entry deleted")


@history_bp.route('', methods=['DELETE'])
@handle_exceptions
def clear_history():
    removed = get_history_service().clear()
    return json_success({'removed': removed}, message="History cleared")
