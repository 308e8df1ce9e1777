"""
Abstractions for pluggable services. Core depends on interfaces, not
concrete services. Enables fakes/mocks and future swaps.

Common protocols:
- LLMClient.chat(messages, settings) -> (reply, meta)
- PdfRenderer.render(html) -> Path

Testing: Use simple fake implementations to test the controller without
network calls or a real browser.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol
from .models import LLMSettings


class LLMClient(Protocol):
    def chat(
        self,
        messages: list[dict[str, str]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]: ...


class PdfRenderer(Protocol):
    def render(self, html: str) -> Path: ...
