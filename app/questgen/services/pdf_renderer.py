"""
Purpose: Print an HTML document to PDF through headless Chromium.

One browser per render: launched right before use, closed on every exit
path. The PDF is written to disk only after export succeeded, so a failed
render leaves no file behind. Failures propagate to the caller.

Testing: Pass a fake `playwright_factory` (a context manager exposing
`.chromium.launch()`); no real browser needed.
"""

from __future__ import annotations
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from playwright.sync_api import sync_playwright

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "interview_questions_"
TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def output_filename(now: Optional[datetime] = None) -> str:
    """interview_questions_<YYYY-MM-DD_HH-MM-SS>.pdf"""
    now = now or datetime.now()
    return f"{FILENAME_PREFIX}{now.strftime(TIMESTAMP_FORMAT)}.pdf"


class PlaywrightPdfRenderer:
    def __init__(
        self,
        output_dir: Union[str, Path, None] = None,
        *,
        playwright_factory: Callable = sync_playwright,
        clock: Callable[[], datetime] = datetime.now,
        page_format: str = "A4",
    ):
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()
        self.playwright_factory = playwright_factory
        self.clock = clock
        self.page_format = page_format

    def render(self, html: str) -> Path:
        """Render `html` and return the path of the written PDF."""
        path = self.output_dir / output_filename(self.clock())

        with self.playwright_factory() as pw:
            browser = pw.chromium.launch(headless=True)
            try:
                page = browser.new_page()
                page.set_content(html, wait_until="networkidle")
                pdf_bytes = page.pdf(format=self.page_format, print_background=True)
            finally:
                browser.close()

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf_bytes)
        logger.info("Wrote %s (%d bytes)", path, len(pdf_bytes))
        return path
