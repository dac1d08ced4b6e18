"""Code Generation Service
=========================

Produces source code for a ``(prompt, language)`` pair.

FLOW:
1. One remote chat completion attempt when a credential is configured
2. Any failure (or no credential) -> deterministic template fallback
3. Unknown language -> generic placeholder, same result shape

The caller only ever sees a successful ``GenerationResult``. Remote failures
are logged here and never propagated.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from codegen.constants import GenerationSource
from codegen.services.language_templates import has_template, render_template
from codegen.services.openrouter_chat_service import OpenRouterChatService, extract_message_content
from codegen.utils.time import utc_now_iso

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional software developer. Generate clean, well-commented, "
    "production-ready code in {language}. Include proper error handling and best practices."
)
USER_PROMPT = "Generate {language} code for: {prompt}"


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling parameters of the single remote attempt."""
    max_tokens: int = 1000
    temperature: float = 0.7


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation request.

    Attributes:
        id: Unique identifier (uuid4)
        code: Generated source code
        language: Echo of the requested language
        prompt: Echo of the requested prompt
        timestamp: ISO-8601 UTC creation instant
        source: Where the code came from (kept out of the wire format)
    """
    id: str
    code: str
    language: str
    prompt: str
    timestamp: str
    source: GenerationSource = field(default=GenerationSource.TEMPLATE, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'code': self.code,
            'language': self.language,
            'prompt': self.prompt,
            'timestamp': self.timestamp,
        }


def build_messages(prompt: str, language: str) -> list:
    return [
        {"role": "system", "content": SYSTEM_PROMPT.format(language=language)},
        {"role": "user", "content": USER_PROMPT.format(language=language, prompt=prompt)},
    ]


class GenerationService:
    """Remote-first code generation with an always-available template fallback."""

    def __init__(self, chat_service: Optional[OpenRouterChatService] = None, config: Optional[GenerationConfig] = None):
        self.chat_service = chat_service if chat_service is not None else OpenRouterChatService()
        self.config = config or GenerationConfig()

    @property
    def remote_enabled(self) -> bool:
        return self.chat_service.is_configured

    async def generate_code(self, prompt: str, language: str) -> GenerationResult:
        """Generate code for a prompt; never raises."""
        code: Optional[str] = None
        source = GenerationSource.TEMPLATE

        if self.remote_enabled:
            code = await self._generate_remote(prompt, language)
            if code is not None:
                source = GenerationSource.REMOTE

        if code is None:
            code = self._generate_fallback(prompt, language)
            if not has_template(language):
                source = GenerationSource.GENERIC

        return GenerationResult(
            id=str(uuid.uuid4()),
            code=code,
            language=language,
            prompt=prompt,
            timestamp=utc_now_iso(),
            source=source,
        )

    async def _generate_remote(self, prompt: str, language: str) -> Optional[str]:
        """Single remote attempt. Returns trimmed text, or None to trigger fallback."""
        start = time.perf_counter()
        try:
            success, response_data, status_code = await self.chat_service.generate_chat_completion(
                messages=build_messages(prompt, language),
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            logger.error(f"Remote generation raised unexpectedly, using template: {e}")
            return None

        if not success:
            error = response_data.get('error') if isinstance(response_data, dict) else response_data
            logger.warning(f"Remote generation failed (status={status_code}), using template: {error}")
            return None

        content = extract_message_content(response_data)
        if content is None or not content.strip():
            logger.warning("Remote generation returned no content, using template")
            return None

        logger.info(f"Remote generation for {language} completed in {time.perf_counter() - start:.2f}s")
        return content.strip()

    def _generate_fallback(self, prompt: str, language: str) -> str:
        if not has_template(language):
            logger.info(f"No template for language '{language}', using generic placeholder")
        return render_template(prompt, language)


_default_service: Optional[GenerationService] = None


def get_generation_service() -> GenerationService:
    """Service bound to the current Flask app, or an env-configured singleton outside one."""
    try:
        from flask import current_app
        service = current_app.extensions.get('generation_service')
        if service is not None:
            return service
    except RuntimeError:
        # No application context (CLI / scripts)
        pass

    global _default_service
    if _default_service is None:
        _default_service = GenerationService()
    return _default_service


def build_generation_service(config: Mapping[str, Any]) -> GenerationService:
    """Build a generation service from a settings mapping (Flask config or CLI settings)."""
    return GenerationService(
        chat_service=OpenRouterChatService.from_config(config),
        config=GenerationConfig(
            max_tokens=int(config.get('GENERATION_MAX_TOKENS') or 1000),
            temperature=float(config.get('GENERATION_TEMPERATURE', 0.7)),
        ),
    )


def init_generation_service(app) -> GenerationService:
    """Create the app-scoped generation service from Flask config."""
    service = build_generation_service(app.config)
    app.extensions['generation_service'] = service
    return service
