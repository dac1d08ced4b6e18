"""
Constants and Enums for the AI Code Generator
=============================================

Centralized enums and the static catalog of selectable target languages.

Notes:
- The catalog mirrors the language picker of the front-end. Only a subset of
  these languages ships a dedicated fallback template; the rest resolve to the
  generic placeholder (see `codegen.services.language_templates`).
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class BaseEnum(str, Enum):
    """Base enum class with string values for consistent behavior."""

    def __str__(self):
        return self.value


class GenerationSource(BaseEnum):
    """Where the code of a generation result came from."""
    REMOTE = "remote"
    TEMPLATE = "template"
    GENERIC = "generic"


# ===========================
# LANGUAGE CATALOG
# ===========================

@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for one selectable target language."""
    value: str
    label: str
    extension: str


_CATALOG = (
    LanguageInfo('javascript', 'JavaScript', 'js'),
    LanguageInfo('html', 'HTML', 'html'),
    LanguageInfo('python', 'Python', 'py'),
    LanguageInfo('java', 'Java', 'java'),
    LanguageInfo('cpp', 'C++', 'cpp'),
    LanguageInfo('csharp', 'C#', 'cs'),
    LanguageInfo('php', 'PHP', 'php'),
    LanguageInfo('ruby', 'Ruby', 'rb'),
    LanguageInfo('go', 'Go', 'go'),
    LanguageInfo('rust', 'Rust', 'rs'),
    LanguageInfo('swift', 'Swift', 'swift'),
    LanguageInfo('kotlin', 'Kotlin', 'kt'),
    LanguageInfo('typescript', 'TypeScript', 'ts'),
    LanguageInfo('css', 'CSS', 'css'),
    LanguageInfo('sql', 'SQL', 'sql'),
    LanguageInfo('bash', 'Bash', 'sh'),
    LanguageInfo('powershell', 'PowerShell', 'ps1'),
    LanguageInfo('r', 'R', 'r'),
    LanguageInfo('matlab', 'MATLAB', 'm'),
    LanguageInfo('scala', 'Scala', 'scala'),
)

SUPPORTED_LANGUAGES: Mapping[str, LanguageInfo] = MappingProxyType({info.value: info for info in _CATALOG})

DEFAULT_LANGUAGE = 'javascript'

# Server-side history cap (browser store kept the same number of entries)
DEFAULT_HISTORY_LIMIT = 50
