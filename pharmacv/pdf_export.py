"""
PDF export of the HTML document.

The print engine sits behind ``PdfPrinter``; ``PlaywrightPdfPrinter`` prints
with headless Chromium. ``export_cv_to_pdf`` reports failures in its result
instead of raising.
"""

from __future__ import annotations

import asyncio
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote

from .logging_utils import LOG
from .renderers.html_renderer import generate_cv_html

PAGE_MARGIN: Dict[str, str] = {"top": "12mm", "bottom": "12mm", "left": "12mm", "right": "12mm"}


@dataclass(frozen=True)
class ExportResult:
    success: bool
    path: Optional[Path] = None
    error: Optional[str] = None


class PdfPrinter(ABC):
    """Turns an HTML document into a PDF file."""

    @abstractmethod
    def print_to_file(self, html: str, output_path: Path) -> Path:
        ...


def _prepare_windows_event_loop() -> None:
    if sys.platform.startswith("win"):
        try:
            asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())  # type: ignore[attr-defined]
        except Exception as e:
            LOG.warning("Could not set Windows event loop policy: %s", e)


class PlaywrightPdfPrinter(PdfPrinter):
    """Prints A4 pages with Playwright and headless Chromium."""

    def __init__(self, timeout_ms: int = 30_000, page_format: str = "A4"):
        self.timeout_ms = timeout_ms
        self.page_format = page_format

    def print_to_file(self, html: str, output_path: Path) -> Path:
        _prepare_windows_event_loop()
        try:
            from playwright.sync_api import sync_playwright  # type: ignore
        except ImportError as e:
            raise RuntimeError("Playwright is not installed. Install the 'pdf' extra.") from e

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        LOG.debug("Printing PDF with Playwright/Chromium to %s", output_path)

        with sync_playwright() as p:
            browser = p.chromium.launch(
                headless=True,
                args=["--no-sandbox", "--disable-dev-shm-usage"],
            )
            try:
                page = browser.new_page()
                page.goto(f"data:text/html;charset=utf-8,{quote(html)}",
                          wait_until="domcontentloaded", timeout=self.timeout_ms)
                page.pdf(
                    path=str(output_path),
                    format=self.page_format,
                    print_background=True,
                    margin=PAGE_MARGIN,
                )
            finally:
                browser.close()
        return output_path


def export_cv_to_pdf(
    cv: Any,
    profile: Any,
    output_path: Path,
    anonymous: bool = False,
    title: Optional[str] = None,
    email: Optional[str] = None,
    printer: Optional[PdfPrinter] = None,
    now: Optional[date] = None,
) -> ExportResult:
    """Render the HTML document and hand it to ``printer``; never raises."""
    try:
        html = generate_cv_html(cv, profile, anonymous=anonymous, title=title, email=email, now=now)
        if not html:
            raise ValueError("No CV data to export")
        printer = printer or PlaywrightPdfPrinter()
        path = printer.print_to_file(html, Path(output_path))
        LOG.info("PDF written to %s", path)
        return ExportResult(success=True, path=Path(path))
    except Exception as e:
        LOG.error("PDF export failed: %s", e)
        LOG.debug("PDF export traceback", exc_info=True)
        return ExportResult(success=False, error=str(e))
