"""
OpenRouter Chat Completion Service
==================================

A small, reusable client for OpenAI-compatible chat completion endpoints
(OpenRouter by default). Handles authentication headers, payload construction
and response validation. Calls never raise: every outcome is reported as a
``(success, data, status_code)`` tuple so callers can decide how to degrade.
"""

import asyncio
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional, Tuple

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "openai/gpt-3.5-turbo"
DEFAULT_TIMEOUT = 300


class OpenRouterChatService:
    """
    Service for making chat completion requests to the OpenRouter API.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        site_url: Optional[str] = None,
        site_name: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.api_key = api_key if api_key is not None else os.getenv('OPENROUTER_API_KEY', '')
        self.api_url = api_url or os.getenv('OPENROUTER_API_URL', DEFAULT_API_URL)
        self.model = model or os.getenv('OPENROUTER_MODEL', DEFAULT_MODEL)
        self.site_url = site_url or os.getenv("OPENROUTER_SITE_URL", "https://ai-code-generator.local")
        self.site_name = site_name or os.getenv("OPENROUTER_SITE_NAME", "AI Code Generator")
        self.timeout = int(timeout or os.getenv("GENERATION_TIMEOUT") or DEFAULT_TIMEOUT)

        if self.api_key:
            logger.info(f"OpenRouterChatService configured (model={self.model})")
        else:
            logger.info("OpenRouter API key not configured; remote generation disabled (using templates)")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "OpenRouterChatService":
        """Build a client from a Flask config mapping."""
        return cls(
            api_key=config.get('OPENROUTER_API_KEY', ''),
            api_url=config.get('OPENROUTER_API_URL'),
            model=config.get('OPENROUTER_MODEL'),
            site_url=config.get('OPENROUTER_SITE_URL'),
            site_name=config.get('OPENROUTER_SITE_NAME'),
            timeout=config.get('GENERATION_TIMEOUT'),
        )

    @property
    def is_configured(self) -> bool:
        """True when a credential is present and remote calls should be attempted."""
        return bool(self.api_key)

    def _get_headers(self) -> Dict[str, str]:
        """Constructs the required headers for an OpenRouter API request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.site_url,
            "X-Title": self.site_name,
            "Content-Type": "application/json"
        }

    def _build_payload(self, messages: list, temperature: float, max_tokens: int, model: Optional[str] = None) -> Dict[str, Any]:
        """Constructs the payload for the chat completion request."""
        return {
            "model": model or self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens
        }

    async def generate_chat_completion(
        self,
        messages: list,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        model: Optional[str] = None,
    ) -> Tuple[bool, Dict[str, Any], int]:
        """
        Makes a single chat completion request.

        Args:
            messages: A list of message objects for the chat history.
            temperature: The sampling temperature.
            max_tokens: The maximum number of tokens to generate.
            model: Optional model override.

        Returns:
            A tuple containing:
            - bool: Success status (True only for a 200 with a usable 'choices' array).
            - dict: The JSON response from the API or an error dictionary.
            - int: The HTTP status code (synthetic for local failures).
        """
        if not self.api_key:
            return False, {"error": "OpenRouter API key not set"}, 401

        headers = self._get_headers()
        payload = self._build_payload(messages, temperature, max_tokens, model)

        logger.info(f"Sending chat completion request to model: {payload['model']}")
        logger.debug(f"Request URL: {self.api_url}")
        logger.debug(f"Full payload: {json.dumps(payload, indent=2)}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.api_url,
                    json=payload,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as response:
                    try:
                        response_data = await response.json(content_type=None)
                    except (json.JSONDecodeError, aiohttp.ContentTypeError, ValueError):
                        text = await response.text()
                        logger.error(f"Non-JSON response from completion API (Status: {response.status})")
                        return False, {"error": f"Invalid JSON: {text[:200]}"}, response.status

                    if not isinstance(response_data, dict):
                        return False, {"error": f"Unexpected response type: {type(response_data).__name__}"}, response.status

                    if response.status != 200:
                        error_obj = response_data.get("error", {})
                        error_message = error_obj.get("message", "Unknown API error") if isinstance(error_obj, dict) else str(error_obj)
                        logger.error(f"OpenRouter API error (Status: {response.status}, Model: {payload['model']}): {error_message}")
                        return False, response_data, response.status

                    choices = response_data.get('choices')
                    if not choices or not isinstance(choices, list):
                        logger.error("Malformed 200 response: missing 'choices' array")
                        return False, {"error": "Missing choices", "response": response_data}, response.status

                    logger.info(f"Successfully received chat completion from {payload['model']}.")
                    return True, response_data, response.status

        except aiohttp.ClientConnectorError as e:
            logger.error(f"Network connection error to OpenRouter: {e}")
            return False, {"error": f"Network error: {e}"}, 503
        except asyncio.TimeoutError:
            logger.error(f"Chat completion timed out after {self.timeout}s")
            return False, {"error": f"Timeout after {self.timeout}s"}, 504
        except Exception as e:
            logger.error(f"An unexpected error occurred during chat completion: {e}")
            return False, {"error": f"Unexpected error: {e}"}, 500


def extract_message_content(response_data: Dict[str, Any]) -> Optional[str]:
    """Return ``choices[0].message.content`` or None when the structure is off."""
    try:
        content = response_data['choices'][0]['message']['content']
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None
