"""
Purpose: The single orchestration point for a run. Owns the QuestionSet and
run counters; sequences persona -> question -> document -> PDF.
Prevents the CLI from knowing how prompts/LLM/rendering work.

Key responsibilities:
- For each subject, `count` times: pick a persona, report progress,
  generate one question, append it to that subject's list.
- Build the HTML document from the QuestionSet.
- Render it through a PdfRenderer and return the written path.

Everything runs strictly in order: one request completes before the next
starts.

Testing: Pure unit tests with fakes: mock LLMClient and PdfRenderer.
"""

from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import Callable, Optional

from .interfaces import LLMClient, PdfRenderer
from .models import (
    Difficulty,
    LLMSettings,
    QuestionRequest,
    QuestionSet,
    RunStats,
    Subject,
)
from .services.document import build_document
from .services.personas import pick_persona
from .services.question_generator import generate_question

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Subject, Difficulty, str, int, int], None]


class QuestionSessionController:
    def __init__(
        self,
        llm: LLMClient,
        renderer: PdfRenderer,
        settings: LLMSettings,
        *,
        escape_html: bool = False,
        rng: Optional[random.Random] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.llm: LLMClient = llm
        self.renderer: PdfRenderer = renderer
        self.settings = settings
        self.escape_html = escape_html
        self.rng = rng
        self.on_progress = on_progress
        self.stats = RunStats()

    def generate_question_set(self, request: QuestionRequest) -> QuestionSet:
        """One question per (subject, iteration), in issue order."""
        results: QuestionSet = {}
        total = len(request.subjects) * request.count
        done = 0
        for subject in request.subjects:
            results[subject] = []
            for _ in range(request.count):
                persona = pick_persona(self.rng)
                done += 1
                if self.on_progress:
                    self.on_progress(
                        subject, request.difficulty, persona, done, total
                    )
                result = generate_question(
                    self.llm,
                    subject,
                    request.difficulty,
                    persona,
                    settings=self.settings,
                )
                self.stats.record(result)
                results[subject].append(result.text)
        logger.info(
            "Generated %d questions (%d fallbacks)",
            self.stats.generated,
            self.stats.failed,
        )
        return results

    def build_document(self, questions: QuestionSet, difficulty: Difficulty) -> str:
        return build_document(questions, difficulty, escape=self.escape_html)

    def render(self, html: str) -> Path:
        return self.renderer.render(html)

    def run(self, request: QuestionRequest) -> Path:
        """Generate, assemble and render; returns the PDF path."""
        self.stats = RunStats()
        questions = self.generate_question_set(request)
        html = self.build_document(questions, request.difficulty)
        return self.render(html)
