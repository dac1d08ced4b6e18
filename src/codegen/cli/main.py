#!/usr/bin/env python3
"""
Code Generator CLI
==================

Generate and analyze code from the terminal, without running the server.

Usage:
    codegen generate "Create a REST API" -l python   # Generate code
    codegen analyze "Build a landing page"           # Rank languages
    codegen languages                                # List selectable languages
    codegen hints rust                               # Language best-practice hints

Add ``--json`` to any command for machine-readable output.
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from codegen.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from codegen.services.generation import GenerationService, build_generation_service
from codegen.services.language_templates import has_template
from codegen.services.prompt_analyzer import analyze_prompt, get_framework_suggestions, get_language_hints
from codegen.utils.async_utils import run_async_safely
from codegen.utils.logging_config import setup_application_logging


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def build_cli_service() -> GenerationService:
    """Generation service configured from the FLASK_ENV settings class."""
    # settings read the environment on import, so load .env first
    from codegen.config.settings import config_values
    return build_generation_service(config_values(os.environ.get('FLASK_ENV', 'default')))


def cmd_generate(args) -> int:
    """Generate code for a prompt (remote first, template fallback)."""
    language = args.language
    if language is None:
        language = analyze_prompt(args.prompt).primary_suggestion
        if not args.json:
            print(f"Detected language: {language}", file=sys.stderr)

    result = run_async_safely(build_cli_service().generate_code(args.prompt, language))
    if args.json:
        _print_json(result.to_dict())
    else:
        print(result.code)
    return 0


def cmd_analyze(args) -> int:
    """Show ranked language suggestions for a prompt."""
    result = analyze_prompt(args.prompt)
    frameworks = get_framework_suggestions(result.primary_suggestion, args.prompt)
    if args.json:
        data = result.to_dict()
        data['frameworks'] = frameworks
        _print_json(data)
        return 0

    if not result.suggestions:
        print(f"No language signals found (default: {result.primary_suggestion})")
        return 0
    print("=" * 60)
    print(f"Primary: {result.primary_suggestion} (confidence {result.confidence:.2f})")
    print("=" * 60)
    for suggestion in result.suggestions:
        print(f"  {suggestion.language:<12} score {suggestion.score:6.2f}  confidence {suggestion.confidence:.2f}")
    if frameworks:
        print(f"Frameworks: {', '.join(frameworks)}")
    return 0


def cmd_languages(args) -> int:
    rows = [
        {'value': info.value, 'label': info.label, 'extension': info.extension, 'has_template': has_template(info.value)}
        for info in SUPPORTED_LANGUAGES.values()
    ]
    if args.json:
        _print_json(rows)
        return 0
    for row in rows:
        marker = '*' if row['has_template'] else ' '
        print(f"{marker} {row['value']:<12} {row['label']:<12} .{row['extension']}")
    print("\n* = dedicated fallback template")
    return 0


def cmd_hints(args) -> int:
    hints = get_language_hints(args.language)
    if args.json:
        _print_json({'language': args.language, 'hints': hints})
        return 0
    if not hints:
        print(f"No hints available for {args.language}")
    for hint in hints:
        print(f"- {hint}")
    return 0


def _non_blank(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("must not be blank")
    return value


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='codegen',
        description='AI code generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('--json', action='store_true', help='Emit JSON output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log to the console')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    gen = subparsers.add_parser('generate', help='Generate code for a prompt')
    gen.add_argument('prompt', type=_non_blank, help='What the code should do')
    gen.add_argument('--language', '-l', type=_non_blank,
                     help=f'Target language (default: detected from prompt, else {DEFAULT_LANGUAGE})')
    gen.set_defaults(func=cmd_generate)

    analyze = subparsers.add_parser('analyze', help='Rank candidate languages for a prompt')
    analyze.add_argument('prompt', help='Prompt to analyze')
    analyze.set_defaults(func=cmd_analyze)

    languages = subparsers.add_parser('languages', help='List selectable languages')
    languages.set_defaults(func=cmd_languages)

    hints = subparsers.add_parser('hints', help='Best-practice hints for a language')
    hints.add_argument('language', help='Language identifier, e.g. python')
    hints.set_defaults(func=cmd_hints)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    if not getattr(args, 'func', None):
        parser.print_help()
        return 1

    load_dotenv()
    if args.verbose:
        setup_application_logging(log_to_file=False)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
