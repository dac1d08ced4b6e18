"""
Database Models for the AI Code Generator

Models include:
- GenerationHistoryEntry: a past generation result with optional analysis metadata
"""

from __future__ import annotations

from ..extensions import db
from .history import GenerationHistoryEntry

from ..utils.time import utc_now

__all__ = [
    'db',
    'GenerationHistoryEntry',
    'utc_now',
]
