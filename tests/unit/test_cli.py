"""Tests for the ``codegen`` command line interface."""
import json

import pytest

import codegen.cli.main as cli_main
from codegen.cli.main import main
from codegen.config.settings import TestingConfig
from codegen.services.generation import GenerationConfig


@pytest.fixture(autouse=True)
def no_remote(monkeypatch):
    monkeypatch.setenv('OPENROUTER_API_KEY', '')
    monkeypatch.setenv('FLASK_ENV', 'testing')
    # keep a developer's .env out of the test run
    monkeypatch.setattr('codegen.cli.main.load_dotenv', lambda *a, **k: False)


@pytest.mark.unit
class TestCli:

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert 'usage' in capsys.readouterr().out.lower()

    def test_generate_with_language(self, capsys):
        assert main(['generate', 'add two numbers', '-l', 'python']) == 0
        out = capsys.readouterr().out
        assert out.startswith('# add two numbers')

    def test_generate_detects_language(self, capsys):
        assert main(['--json', 'generate', 'Build a webpage with a styled button']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['language'] == 'html'
        assert 'Build a webpage with a styled button' in data['code']

    def test_generate_rejects_blank_prompt(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['generate', '   ', '-l', 'python'])
        assert exc.value.code == 2

    def test_analyze_json(self, capsys):
        assert main(['--json', 'analyze', 'Build an Express backend with React']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['primarySuggestion'] == 'javascript'
        assert data['frameworks'] == ['react', 'express']

    def test_analyze_text(self, capsys):
        assert main(['analyze', '']) == 0
        assert 'No language signals' in capsys.readouterr().out

    def test_languages(self, capsys):
        assert main(['--json', 'languages']) == 0
        rows = json.loads(capsys.readouterr().out)
        assert len(rows) == 20

    def test_hints(self, capsys):
        assert main(['hints', 'cpp']) == 0
        assert '- Use RAII principles' in capsys.readouterr().out

    def test_generate_uses_configured_settings(self, monkeypatch, capsys):
        monkeypatch.setattr(TestingConfig, 'GENERATION_MAX_TOKENS', 64)
        monkeypatch.setattr(TestingConfig, 'GENERATION_TEMPERATURE', 0.2)
        monkeypatch.setattr(TestingConfig, 'GENERATION_TIMEOUT', 7)
        built = []
        real_build = cli_main.build_generation_service

        def recording_build(values):
            service = real_build(values)
            built.append(service)
            return service

        monkeypatch.setattr(cli_main, 'build_generation_service', recording_build)
        assert main(['generate', 'add two numbers', '-l', 'python']) == 0

        service = built[0]
        assert service.config == GenerationConfig(max_tokens=64, temperature=0.2)
        assert service.chat_service.timeout == 7
        assert not service.remote_enabled
