"""
Conformance verifier between the interactive preview and the HTML export.

Both artifacts are rendered for the same CV, profile and mode; every
display string of the preview must be found in the text of the exported
document. Contacts are supplied to the export by the caller and are left out
of the comparison.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Optional

import lxml.html

from ..anonymizer import ANONYMOUS_SCHOOL_LABEL
from ..models import StructuredCV, as_structured_cv
from ..options import anonymous_company_label
from ..renderers.html_renderer import generate_cv_html
from ..renderers.preview import render_preview
from ..shared import VerificationResult, ViewMode, clean_text
from .base import CVVerifier


def html_text(markup: str) -> str:
    """Visible text of an HTML document, whitespace collapsed."""
    if not markup:
        return ""
    doc = lxml.html.document_fromstring(markup)
    for el in doc.xpath("//style | //script | //title"):
        el.drop_tree()
    return clean_text(doc.text_content())


def raw_identifiers(cv: StructuredCV) -> List[str]:
    """Company and school names that anonymous output must not contain."""
    names = []
    for exp in cv.experiences:
        name = exp.company_name.strip()
        if len(name) >= 2 and name != anonymous_company_label(exp.company_type):
            names.append(name)
    for form in cv.formations:
        name = form.school_name.strip()
        if len(name) >= 2 and name != ANONYMOUS_SCHOOL_LABEL:
            names.append(name)
    return list(dict.fromkeys(names))


def _leaks(names: Iterable[str], text: str) -> List[str]:
    return [name for name in names if clean_text(name) in text]


class ConformanceVerifier(CVVerifier):
    """
    Checks that the HTML export shows every display string of the preview.
    """

    def verify(self, data: Any, **kwargs) -> VerificationResult:
        """
        Args:
            data: StructuredCV or its dict form
            **kwargs: ``profile``, ``mode`` (ViewMode, "anonymous"/"full" or an
                anonymous bool, default anonymous) and ``now``
        """
        profile = kwargs.get("profile")
        mode = ViewMode.coerce(kwargs.get("mode", ViewMode.ANONYMOUS))
        now: Optional[date] = kwargs.get("now") or date.today()

        cv = as_structured_cv(data)
        if cv is None:
            return VerificationResult(ok=True, errors=[], warnings=["no CV data to compare"])

        preview = render_preview(cv, profile, mode, show_toggle=False, now=now)
        export_text = html_text(generate_cv_html(cv, profile, anonymous=mode.anonymous, now=now))

        errs: List[str] = []
        for text in dict.fromkeys(preview.display_strings()):
            if clean_text(text) not in export_text:
                errs.append(f"preview text missing from export: {text!r}")

        if mode.anonymous:
            names = raw_identifiers(cv)
            preview_text = clean_text(" ".join(preview.display_strings(include_caller_supplied=True)))
            for name in _leaks(names, preview_text):
                errs.append(f"anonymous preview shows raw name: {name!r}")
            for name in _leaks(names, export_text):
                errs.append(f"anonymous export shows raw name: {name!r}")

        return VerificationResult(ok=not errs, errors=errs, warnings=[])
