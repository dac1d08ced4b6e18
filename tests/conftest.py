import sys
from pathlib import Path

# Ensure the application package under src/ is importable when running tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import os
from unittest.mock import AsyncMock, Mock

import pytest

from codegen.factory import create_app
from codegen.extensions import db as _db


@pytest.fixture
def app():
    """Create application for the tests (in-memory SQLite, no remote key)."""
    os.environ['FLASK_ENV'] = 'testing'

    app = create_app('testing')
    app.config.update({
        'TESTING': True,
        'HISTORY_LIMIT': 50,
        'HISTORY_ENABLED': True,
    })

    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


def make_chat_service(*, configured=True, result=None, side_effect=None):
    """Stand-in for OpenRouterChatService with a scripted completion outcome."""
    service = Mock()
    service.is_configured = configured
    service.model = 'test/model'
    service.generate_chat_completion = AsyncMock(return_value=result, side_effect=side_effect)
    return service


def completion(content):
    """A successful chat completion response carrying ``content``."""
    return True, {'choices': [{'message': {'role': 'assistant', 'content': content}}]}, 200


@pytest.fixture
def remote_chat(app):
    """Swap the app's chat client for a configured mock; tests set its return value."""
    service = make_chat_service(result=completion("print('remote')"))
    app.extensions['generation_service'].chat_service = service
    return service


@pytest.fixture
def chat_factory():
    """Factory fixture building scripted chat clients (see ``make_chat_service``)."""
    return make_chat_service


@pytest.fixture
def completion_response():
    return completion
