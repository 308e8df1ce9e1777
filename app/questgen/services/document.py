"""
Purpose: Fold a QuestionSet into one static HTML page (title, difficulty
banner, one section per subject).

Question text goes in verbatim unless `escape=True`; model output is
treated as plain trusted text.
"""

from __future__ import annotations
import html
from typing import Mapping, Sequence, Union

from ..models import Difficulty, Subject

TITLE = "Your Quests"

STYLES = """
    <style>
      body {
        font-family: 'Segoe UI', sans-serif;
        padding: 20px;
        color: #222;
        line-height: 1.4;
      }
      h1 {
        text-align: center;
        color: #2E86DE;
      }
      h2 {
        margin-top: 40px;
        border-bottom: 1px solid #ddd;
        padding-bottom: 5px;
        color: #555;
      }
      p {
        margin: 10px 0;
      }
    </style>
"""


def _label(value: Union[Subject, Difficulty, str]) -> str:
    return value.value if isinstance(value, (Subject, Difficulty)) else str(value)


def build_document(
    questions_by_subject: Mapping[Union[Subject, str], Sequence[str]],
    difficulty: Union[Difficulty, str],
    *,
    escape: bool = False,
) -> str:
    def fmt(text: str) -> str:
        return html.escape(text) if escape else text

    parts: list[str] = [
        f"<h1>{TITLE}</h1>",
        f'<p style="text-align:center;">Difficulty: '
        f"<strong>{fmt(_label(difficulty))}</strong></p>",
    ]
    for subject, questions in questions_by_subject.items():
        parts.append(f"<h2>{fmt(_label(subject))}</h2>")
        for q in questions:
            parts.append(f"<p>{fmt(q)}</p>")

    body = "".join(parts)
    return (
        '<!DOCTYPE html><html><head><meta charset="utf-8">'
        f"{STYLES}</head><body>{body}</body></html>"
    )
