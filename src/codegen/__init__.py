"""
AI Code Generator Package
=========================

Flask application that turns natural-language prompts into source code.
Uses the factory pattern implemented in factory.py for application creation.
"""

from codegen.factory import create_app

__all__ = ['create_app']
