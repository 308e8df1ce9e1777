"""
Purpose: Thin client wrapper around Gemini, spoken to through the OpenAI SDK
(Gemini exposes an OpenAI-compatible endpoint). One place for auth, model
options and response/usage normalization.

No retries: every call is at-most-once, failures surface to the caller.

Testing: Mock SDK calls; assert it maps usage and errors correctly.
"""

from __future__ import annotations
from typing import Optional

from openai import OpenAI

from ..config import GEMINI_OPENAI_BASE_URL
from ..models import LLMSettings


class GeminiLLMClient:
    def __init__(self, api_key: str, base_url: str = GEMINI_OPENAI_BASE_URL):
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY")
        try:
            self.client = OpenAI(api_key=self.api_key, base_url=base_url)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize Gemini client: {e}") from e

    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ):
        payload = []
        if system:
            payload.append({"role": "system", "content": system})
        payload.extend(messages)

        cc = self.client.chat.completions.create(
            model=settings.model,
            messages=payload,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
        )
        if not cc.choices:
            raise ValueError("Response contained no candidates")
        text = cc.choices[0].message.content or ""
        usage = getattr(cc, "usage", None)
        tokens_in = getattr(usage, "prompt_tokens", 0) if usage else 0
        tokens_out = getattr(usage, "completion_tokens", 0) if usage else 0
        return text, {
            "model": cc.model,
            "tokens_in": tokens_in or 0,
            "tokens_out": tokens_out or 0,
        }
