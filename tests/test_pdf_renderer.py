from datetime import datetime

import pytest

from questgen.services.pdf_renderer import PlaywrightPdfRenderer, output_filename

from conftest import FILENAME_RE_PATTERN as FILENAME_RE, FIXED_NOW, FakePlaywright


def test_output_filename_format():
    assert output_filename(FIXED_NOW) == "interview_questions_2024-03-09_14-05-07.pdf"
    assert FILENAME_RE.match(output_filename())


def test_render_writes_timestamped_pdf(renderer, fake_playwright, tmp_path):
    path = renderer.render("<html><body><p>Q1</p></body></html>")

    assert path.parent == tmp_path
    assert FILENAME_RE.match(path.name)
    assert path.exists()
    assert path.read_bytes().startswith(b"%PDF")

    browser = fake_playwright.chromium.browsers[0]
    assert browser.closed
    assert browser.wait_until == "networkidle"
    assert browser.pdf_options == {"format": "A4", "print_background": True}
    assert "<p>Q1</p>" in browser.html
    assert fake_playwright.exited


def test_browser_released_when_export_fails(tmp_path):
    pw = FakePlaywright(fail_export=True)
    renderer = PlaywrightPdfRenderer(
        tmp_path, playwright_factory=pw, clock=lambda: FIXED_NOW
    )

    with pytest.raises(RuntimeError, match="export failed"):
        renderer.render("<html></html>")

    assert len(pw.chromium.browsers) == 1
    assert pw.chromium.browsers[0].closed
    assert pw.exited
    assert list(tmp_path.iterdir()) == []


def test_creates_missing_output_dir(tmp_path, fake_playwright):
    out = tmp_path / "nested" / "out"
    renderer = PlaywrightPdfRenderer(
        out, playwright_factory=fake_playwright, clock=lambda: datetime(2025, 1, 2, 3, 4, 5)
    )
    path = renderer.render("<html></html>")
    assert path == out / "interview_questions_2025-01-02_03-04-05.pdf"
    assert path.exists()


def test_defaults_to_cwd(tmp_path, monkeypatch, fake_playwright):
    monkeypatch.chdir(tmp_path)
    renderer = PlaywrightPdfRenderer(playwright_factory=fake_playwright)
    path = renderer.render("<html></html>")
    assert path.parent == tmp_path
