"""Shared fakes: an LLM client and a Playwright stand-in (no network, no browser)."""

from __future__ import annotations
import re
from datetime import datetime

import pytest

from questgen.models import LLMSettings
from questgen.services.pdf_renderer import PlaywrightPdfRenderer


class FakeLLM:
    """Returns canned replies in order; an Exception instance is raised instead."""

    def __init__(self, replies=None, default="What is 2 + 2?"):
        self.replies = list(replies or [])
        self.default = default
        self.calls: list[list[dict[str, str]]] = []

    def chat(self, messages, settings, system=None):
        self.calls.append(messages)
        reply = self.replies.pop(0) if self.replies else self.default
        if isinstance(reply, BaseException):
            raise reply
        return reply, {"model": settings.model, "tokens_in": 10, "tokens_out": 20}


class FakePage:
    def __init__(self, browser):
        self.browser = browser

    def set_content(self, html, wait_until=None):
        self.browser.html = html
        self.browser.wait_until = wait_until

    def pdf(self, format=None, print_background=None):
        self.browser.pdf_options = {
            "format": format,
            "print_background": print_background,
        }
        if self.browser.fail_export:
            raise RuntimeError("export failed")
        return b"%PDF-1.4 fake"


class FakeBrowser:
    def __init__(self, fail_export=False):
        self.fail_export = fail_export
        self.closed = False
        self.html = None
        self.wait_until = None
        self.pdf_options = None

    def new_page(self):
        return FakePage(self)

    def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, fail_export=False):
        self.fail_export = fail_export
        self.browsers: list[FakeBrowser] = []

    def launch(self, headless=True):
        browser = FakeBrowser(self.fail_export)
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, fail_export=False):
        self.chromium = FakeChromium(fail_export)
        self.entered = False
        self.exited = False

    def __call__(self):
        return self

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, *exc):
        self.exited = True
        return False


FIXED_NOW = datetime(2024, 3, 9, 14, 5, 7)
FILENAME_RE_PATTERN = re.compile(
    r"^interview_questions_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.pdf$"
)


@pytest.fixture
def llm_settings():
    return LLMSettings(model="gemini-2.0-flash")


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def fake_playwright():
    return FakePlaywright()


@pytest.fixture
def renderer(tmp_path, fake_playwright):
    return PlaywrightPdfRenderer(
        tmp_path, playwright_factory=fake_playwright, clock=lambda: FIXED_NOW
    )
