"""Question prompt (one interview question, told by a persona)"""

from __future__ import annotations
from textwrap import dedent

from questgen.models import Difficulty, Subject


def build_question_prompt(
    *,
    subject: Subject,
    difficulty: Difficulty,
    persona: str,
) -> str:
    return dedent(
        f"""\
        Generate a high-quality {difficulty.value} level interview question of {subject.value} in {persona} to make it slightly engaging, but do NOT distract or use excessive storytelling. Focus on the actual question content.
        Rules:
        - Make the question numerical-centric rather than theoretical, to retain attention and keep it interesting.
        - No rich text or markdown. Use brackets or UPPERCASE letters to highlight the important parts of the question.
        - No header, no footer, no greetings. Output the question directly.
        """
    ).strip()
