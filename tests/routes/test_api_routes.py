"""
Test suite for API routes in src/codegen/routes/api/

Covers the endpoints the browser front-end calls (bare JSON) and the
envelope endpoints for analysis and history.
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from codegen.extensions import db
from codegen.services.history_service import HistoryService
from codegen.services.language_templates import render_template


def _generate(client, prompt="Create a function", language="python"):
    return client.post('/api/generate', json={'prompt': prompt, 'language': language})


@pytest.mark.integration
class TestGenerateRoute:

    @pytest.mark.parametrize('body', [
        {},
        {'prompt': 'x'},
        {'language': 'python'},
        {'prompt': '', 'language': 'python'},
        {'prompt': '   ', 'language': 'python'},
        {'prompt': 'x', 'language': ''},
        {'prompt': 123, 'language': 'python'},
    ])
    def test_missing_input_rejected(self, client, body):
        response = client.post('/api/generate', json=body)
        assert response.status_code == 400
        data = response.get_json()
        assert data['error'] == "Prompt and language are required"

    def test_non_json_body_rejected(self, client):
        response = client.post('/api/generate', data='prompt=x', content_type='text/plain')
        assert response.status_code == 400
        assert response.get_json()['error'] == "Prompt and language are required"

    def test_template_generation(self, client):
        response = _generate(client, "Create a function", "python")
        assert response.status_code == 200
        data = response.get_json()
        assert set(data) == {'id', 'code', 'language', 'prompt', 'timestamp'}
        assert data['code'] == render_template("Create a function", "python")
        assert data['language'] == 'python'
        assert data['prompt'] == 'Create a function'

    def test_unknown_language_still_succeeds(self, client):
        data = _generate(client, "hello", "cobol").get_json()
        assert data['code'].startswith("// hello\n// Generated code for cobol")

    def test_remote_generation(self, client, remote_chat, completion_response):
        remote_chat.generate_chat_completion.return_value = completion_response("  fn main() {}  ")
        data = _generate(client, "entry point", "rust").get_json()
        assert data['code'] == "fn main() {}"
        remote_chat.generate_chat_completion.assert_awaited_once()

    def test_remote_failure_is_invisible(self, client, remote_chat):
        remote_chat.generate_chat_completion.return_value = (False, {'error': 'Network error'}, 503)
        response = _generate(client, "entry point", "rust")
        assert response.status_code == 200
        assert response.get_json()['code'] == render_template("entry point", "rust")

    def test_records_history_with_analysis(self, client):
        generated = _generate(client, "Build a webpage with a styled button", "html").get_json()

        response = client.get('/api/history')
        entries = response.get_json()['data']
        assert entries[0]['id'] == generated['id']
        assert entries[0]['analysis']['primarySuggestion'] == 'html'

    def test_history_failure_does_not_fail_generation(self, client):
        with patch.object(HistoryService, '_evict_overflow', side_effect=SQLAlchemyError("disk full")):
            response = _generate(client, "entry point", "go")
        assert response.status_code == 200
        assert response.get_json()['code'] == render_template("entry point", "go")
        assert client.get('/api/history').get_json()['data'] == []

    def test_history_disabled(self, app, client):
        app.config['HISTORY_ENABLED'] = False
        _generate(client)
        assert client.get('/api/history').get_json()['data'] == []


@pytest.mark.integration
class TestCoreRoutes:

    def test_health_endpoint(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'OK'
        assert data['timestamp'].endswith('Z')
        assert data['remote_generation'] is False

    def test_health_reports_remote(self, client, remote_chat):
        assert client.get('/api/health').get_json()['remote_generation'] is True

    def test_languages(self, client):
        response = client.get('/api/languages')
        assert response.status_code == 200
        languages = response.get_json()
        assert len(languages) == 20
        assert languages[0] == {'value': 'javascript', 'label': 'JavaScript', 'extension': 'js', 'has_template': True}
        by_value = {item['value']: item for item in languages}
        assert by_value['cpp']['label'] == 'C++'
        assert by_value['kotlin']['has_template'] is False

    def test_unknown_route_json_404(self, client):
        response = client.get('/api/does-not-exist')
        assert response.status_code == 404
        data = response.get_json()
        assert data['status'] == 'error'
        assert data['status_code'] == 404
        assert data['error_id']

    def test_method_not_allowed(self, client):
        response = client.get('/api/generate')
        assert response.status_code == 405

    def test_cors_headers(self, client):
        response = client.get('/api/health', headers={'Origin': 'http://localhost:5173'})
        assert response.headers.get('Access-Control-Allow-Origin') in ('*', 'http://localhost:5173')


@pytest.mark.integration
class TestAnalysisRoutes:

    def test_analyze(self, client):
        response = client.post('/api/analyze', json={'prompt': 'Build an Express backend with React'})
        assert response.status_code == 200
        body = response.get_json()
        assert body['ok'] is True
        data = body['data']
        assert data['primarySuggestion'] == 'javascript'
        assert data['frameworks'] == ['react', 'express']
        assert 'Use modern ES6+ syntax' in data['hints']

    def test_analyze_empty_prompt(self, client):
        data = client.post('/api/analyze', json={}).get_json()['data']
        assert data['primarySuggestion'] == 'javascript'
        assert data['confidence'] == 0
        assert data['suggestions'] == []

    def test_analyze_rejects_non_string(self, client):
        response = client.post('/api/analyze', json={'prompt': ['a']})
        assert response.status_code == 400
        assert response.get_json()['ok'] is False

    def test_enhance(self, client):
        response = client.post('/api/enhance', json={
            'prompt': 'Build a webpage with a styled button',
            'language': 'html',
            'frameworks': ['bootstrap'],
        })
        assert response.status_code == 200
        assert response.get_json()['data']['prompt'].endswith("// Generate this in html using bootstrap")

    def test_enhance_requires_fields(self, client):
        response = client.post('/api/enhance', json={'prompt': 'x'})
        assert response.status_code == 400
        body = response.get_json()
        assert body['ok'] is False
        assert body['error']['details'] == {'missing': ['language']}

    def test_enhance_rejects_bad_frameworks(self, client):
        response = client.post('/api/enhance', json={'prompt': 'x', 'language': 'go', 'frameworks': 'gin'})
        assert response.status_code == 400

    def test_language_hints(self, client):
        body = client.get('/api/languages/java/hints').get_json()
        assert body['data']['language'] == 'java'
        assert len(body['data']['hints']) == 4
        assert client.get('/api/languages/rust/hints').get_json()['data']['hints'] == []


@pytest.mark.integration
class TestHistoryRoutes:

    def test_list_with_limit(self, client):
        ids = [_generate(client, f"prompt {n}").get_json()['id'] for n in range(3)]
        body = client.get('/api/history?limit=2').get_json()
        assert [e['id'] for e in body['data']] == [ids[2], ids[1]]
        assert body['meta']['total'] == 3
        assert body['meta']['capacity'] == 50

    @pytest.mark.parametrize('limit', ['abc', '-1'])
    def test_invalid_limit(self, client, limit):
        response = client.get(f'/api/history?limit={limit}')
        assert response.status_code == 400
        assert response.get_json()['ok'] is False

    def test_get_and_delete_entry(self, client):
        entry_id = _generate(client).get_json()['id']

        assert client.get(f'/api/history/{entry_id}').get_json()['data']['id'] == entry_id
        response = client.delete(f'/api/history/{entry_id}')
        assert response.status_code == 200
        assert client.get(f'/api/history/{entry_id}').status_code == 404
        assert client.delete(f'/api/history/{entry_id}').status_code == 404

    def test_clear(self, client):
        for n in range(3):
            _generate(client, f"prompt {n}")
        response = client.delete('/api/history')
        assert response.get_json()['data'] == {'removed': 3}
        assert client.get('/api/history').get_json()['data'] == []

    def test_clear_storage_failure(self, client):
        _generate(client)
        with patch.object(db.session, 'commit', side_effect=SQLAlchemyError("database is locked")):
            response = client.delete('/api/history')
        assert response.status_code == 500
        body = response.get_json()
        assert body['ok'] is False
        assert body['error']['type'] == 'OperationError'
        assert len(client.get('/api/history').get_json()['data']) == 1

    def test_cap(self, app, client):
        app.config['HISTORY_LIMIT'] = 5
        ids = [_generate(client, f"prompt {n}").get_json()['id'] for n in range(8)]
        entries = client.get('/api/history').get_json()['data']
        assert [e['id'] for e in entries] == list(reversed(ids[3:]))


@pytest.mark.integration
def test_webpage_scenario(client):
    """Front-end flow: analyze, pick the suggestion, generate, then see it in history."""
    prompt = "Build a webpage with a styled button"

    analysis = client.post('/api/analyze', json={'prompt': prompt}).get_json()['data']
    ranked = [s['language'] for s in analysis['suggestions']]
    assert ranked[0] == 'html'
    assert 'rust' not in ranked and 'sql' not in ranked

    generated = client.post('/api/generate', json={'prompt': prompt, 'language': analysis['primarySuggestion']}).get_json()
    assert generated['language'] == 'html'
    assert prompt in generated['code']

    history = client.get('/api/history').get_json()['data']
    assert history[0]['id'] == generated['id']
