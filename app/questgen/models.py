"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- Subject / Difficulty (closed sets offered by the input collector).
- QuestionRequest (what the user asked for in one run).
- GenerationResult (one generated question, or the fallback).
- LLMSettings (model, temperature, top_p, max_tokens).

Testing: Mostly types. QuestionRequest validates itself on construction.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


FALLBACK_QUESTION = "Failed to generate question."


class Subject(str, Enum):
    DSA = "DSA"
    OOPS = "OOPs"
    SYSTEM_DESIGN = "System Design"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


# Subject -> questions, in generation order.
QuestionSet = dict[Subject, list[str]]


@dataclass
class QuestionRequest:
    subjects: list[Subject]
    difficulty: Difficulty
    count: int = 5

    def __post_init__(self) -> None:
        if not self.subjects:
            raise ValueError("Select at least one subject")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError("Count must be an integer")
        if self.count <= 0:
            raise ValueError("Must be at least 1")
        self.subjects = [Subject(s) for s in self.subjects]
        self.difficulty = Difficulty(self.difficulty)


@dataclass
class GenerationResult:
    """One question slot. `text` is always printable, even on failure."""

    text: str
    ok: bool = True
    error: Optional[str] = None
    tokens_in: int = 0
    tokens_out: int = 0

    @classmethod
    def fallback(cls, error: str = "") -> "GenerationResult":
        return cls(text=FALLBACK_QUESTION, ok=False, error=error or None)


@dataclass
class LLMSettings:
    model: str
    temperature: float = 0.9
    top_p: float = 1.0
    max_tokens: int = 512


@dataclass
class RunStats:
    generated: int = 0
    failed: int = 0
    tokens_in: int = 0
    tokens_out: int = 0
    failures: list[str] = field(default_factory=list)

    def record(self, result: GenerationResult) -> None:
        if result.ok:
            self.generated += 1
        else:
            self.failed += 1
            if result.error:
                self.failures.append(result.error)
        self.tokens_in += result.tokens_in
        self.tokens_out += result.tokens_out
