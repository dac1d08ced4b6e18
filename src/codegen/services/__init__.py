"""
Services Package

This package contains the service layer:
- Prompt analysis (language suggestions, framework detection, hints)
- Code generation (remote chat completion with template fallback)
- Generation history (database-backed, capped)
"""

from .generation import GenerationResult, GenerationService, get_generation_service
from .history_service import HistoryService, get_history_service
from .openrouter_chat_service import OpenRouterChatService
from .prompt_analyzer import AnalysisResult, analyze_prompt

__all__ = [
    'GenerationResult',
    'GenerationService',
    'get_generation_service',
    'HistoryService',
    'get_history_service',
    'OpenRouterChatService',
    'AnalysisResult',
    'analyze_prompt',
]
