"""
Purpose: Generate one interview question for a subject/difficulty/persona.
Why: Keep prompt + LLM call + failure masking in one place so the
controller only ever sees a usable string.

Policy: one request per call, no retry. Any failure is logged and turned
into the fallback result; one bad question never aborts a run.

Testing: Fake LLMClient returning text, empty text, or raising.
"""

from __future__ import annotations
import logging

from ..interfaces import LLMClient
from ..models import Difficulty, GenerationResult, LLMSettings, Subject
from ..prompts import build_question_prompt

logger = logging.getLogger(__name__)


def generate_question(
    llm: LLMClient,
    subject: Subject,
    difficulty: Difficulty,
    persona: str,
    *,
    settings: LLMSettings,
) -> GenerationResult:
    label = getattr(subject, "value", subject)
    try:
        prompt = build_question_prompt(
            subject=Subject(subject),
            difficulty=Difficulty(difficulty),
            persona=persona,
        )
        text, meta = llm.chat([{"role": "user", "content": prompt}], settings)
    except Exception as e:
        logger.warning("Error generating %s question: %s", label, e)
        return GenerationResult.fallback(f"{type(e).__name__}: {e}")

    text = (text or "").strip() if isinstance(text, str) else ""
    if not text:
        logger.warning("Empty response for %s question", label)
        return GenerationResult.fallback("empty response")

    meta = meta if isinstance(meta, dict) else {}
    return GenerationResult(
        text=text,
        tokens_in=_as_int(meta.get("tokens_in")),
        tokens_out=_as_int(meta.get("tokens_out")),
    )


def _as_int(value) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0
