"""
Shared models and text utilities.

Defines common data structures (view modes, render context, verification
results) and text helpers used across projection, rendering and verification.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Optional

from .models import RatingData

# ------------------------- Models -------------------------

@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    errors: List[str]
    warnings: List[str]


class ViewMode(str, Enum):
    ANONYMOUS = "anonymous"
    FULL = "full"

    @classmethod
    def coerce(cls, value: Any) -> "ViewMode":
        """Accept a ViewMode, its string value, or a boolean ``anonymous`` flag."""
        if isinstance(value, ViewMode):
            return value
        if isinstance(value, bool):
            return cls.ANONYMOUS if value else cls.FULL
        if isinstance(value, str) and value.lower() == cls.FULL.value:
            return cls.FULL
        return cls.ANONYMOUS

    @property
    def anonymous(self) -> bool:
        return self is ViewMode.ANONYMOUS


@dataclass
class RenderContext:
    """
    Per-call rendering options.

    ``email`` is caller-provided contact data for document export; the
    interactive previews read contacts from the CV itself.
    """
    mode: ViewMode = ViewMode.ANONYMOUS
    now: Optional[date] = None
    title: Optional[str] = None
    email: Optional[str] = None
    rating: Optional[RatingData] = None
    show_toggle: bool = True
    output_path: Optional[Path] = None

    def resolved_now(self) -> date:
        return self.now or date.today()

# ------------------------- Text helpers -------------------------

_WS_RE = re.compile(r"\s+")

def clean_text(text: Optional[str]) -> str:
    """Collapse whitespace and convert NBSP to plain spaces."""
    if not text:
        return ""
    text = text.replace("\u00A0", " ")
    return _WS_RE.sub(" ", text).strip()

def join_non_empty(parts: Iterable[Optional[str]], sep: str = ", ") -> str:
    return sep.join(p for p in (clean_text(x) for x in parts) if p)

# Characters outside the XML 1.0 Char production
_INVALID_XML_RE = re.compile(r"[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")

def xml_safe(text: Optional[str]) -> str:
    """Make free text insertable into a Word document: NBSP and control characters."""
    if not text:
        return ""
    text = text.replace("\u00A0", " ").replace("\r\n", "\n").replace("\r", "\n")
    return _INVALID_XML_RE.sub("", text)
