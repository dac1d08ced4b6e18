"""Tests for deterministic fallback templates."""
import pytest

from codegen.constants import SUPPORTED_LANGUAGES
from codegen.services.language_templates import (
    LANGUAGE_TEMPLATES,
    generic_placeholder,
    has_template,
    render_template,
)

TEMPLATED = ['javascript', 'python', 'java', 'cpp', 'csharp', 'php', 'ruby', 'go', 'rust', 'swift', 'html']


@pytest.mark.unit
class TestLanguageTemplates:

    def test_templated_languages(self):
        assert sorted(LANGUAGE_TEMPLATES) == sorted(TEMPLATED)
        assert all(has_template(language) for language in TEMPLATED)
        assert not has_template('kotlin')

    @pytest.mark.parametrize('language', sorted(SUPPORTED_LANGUAGES))
    def test_every_catalog_language_embeds_prompt(self, language):
        code = render_template("reverse a linked list", language)
        assert "reverse a linked list" in code

    def test_generic_placeholder_shape(self):
        assert generic_placeholder("sort numbers", "kotlin") == (
            "// sort numbers\n"
            "// Generated code for kotlin\n"
            "console.log('Code generated successfully');"
        )
        assert render_template("sort numbers", "kotlin") == generic_placeholder("sort numbers", "kotlin")

    def test_python_template(self):
        code = render_template("add two numbers", "python")
        assert code.startswith("# add two numbers\n")
        assert 'Implementation based on: add two numbers' in code
        assert 'if __name__ == "__main__":' in code

    def test_php_template_wrapped_in_tags(self):
        code = render_template("greet", "php")
        assert code.startswith("<?php\n// greet")
        assert code.endswith("?>")

    def test_html_template_uses_prompt_as_title(self):
        code = render_template("Todo list", "html")
        assert "<title>Todo list</title>" in code
        assert "<h1>Todo list</h1>" in code
        assert code.startswith("<!DOCTYPE html>")

    def test_braces_rendered_literally(self):
        code = render_template("x", "rust")
        assert 'println!("{}", result);' in code
        assert "fn solution() -> String {" in code

    def test_prompt_with_braces_is_not_formatted(self):
        code = render_template("use {placeholders} literally", "javascript")
        assert code.startswith("// use {placeholders} literally")

    def test_deterministic(self):
        assert render_template("same", "go") == render_template("same", "go")
