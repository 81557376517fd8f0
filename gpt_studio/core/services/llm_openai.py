"""
Purpose: Thin client wrapper around the OpenAI SDK, pointed at any
chat-completions compatible endpoint (GitHub Models by default).
One place for auth, model options, response/usage normalization.

Calls are fire-once: no retries, no backoff. Every SDK error and every
response without a usable first choice becomes UnexpectedResponse.

Testing: Mock SDK calls; assert it maps usage and errors correctly.
"""

from __future__ import annotations
import logging
from typing import Optional

from openai import APIError, APIStatusError, OpenAI

from ..errors import UnexpectedResponse
from ..models import LLMSettings

logger = logging.getLogger(__name__)


class OpenAILLMClient:
    def __init__(self, api_key: Optional[str], *, base_url: Optional[str] = None):
        # A missing key is not fatal here; the endpoint rejects the first call.
        self.api_key = api_key or "missing-token"
        self.base_url = base_url
        self.client = OpenAI(api_key=self.api_key, base_url=base_url)

    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]:
        payload = []
        if system:
            payload.append({"role": "system", "content": system})
        payload.extend(messages)

        logger.debug(
            "chat.completions.create model=%s temperature=%s max_tokens=%s messages=%d",
            settings.model,
            settings.temperature,
            settings.max_tokens,
            len(payload),
        )
        try:
            cc = self.client.chat.completions.create(
                model=settings.model,
                messages=payload,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
            )
        except APIStatusError as e:
            raise UnexpectedResponse(
                f"Completion request failed ({e.status_code}): {e.message}",
                status_code=e.status_code,
            ) from e
        except APIError as e:
            raise UnexpectedResponse(f"Completion request failed: {e.message}") from e

        choices = getattr(cc, "choices", None) or []
        if not choices:
            raise UnexpectedResponse("Completion response contained no choices.")
        message = getattr(choices[0], "message", None)
        text = getattr(message, "content", None)
        if text is None:
            raise UnexpectedResponse("First completion choice has no message text.")

        usage = getattr(cc, "usage", None)
        tokens_in = getattr(usage, "prompt_tokens", 0) if usage else 0
        tokens_out = getattr(usage, "completion_tokens", 0) if usage else 0
        return text, {
            "model": getattr(cc, "model", settings.model),
            "tokens_in": tokens_in or 0,
            "tokens_out": tokens_out or 0,
        }
