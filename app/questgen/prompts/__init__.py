"""Prompt builders."""

from .question import build_question_prompt

__all__ = ["build_question_prompt"]
