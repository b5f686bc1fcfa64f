"""
Interactive CV preview.

Builds the section tree shown in the app from the shared projection. The
anonymous view goes through the anonymizer on every toggle; completeness and
total experience are computed from the raw CV, whatever the mode.
"""

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from ..anonymizer import CVView, FullView, completeness, project
from ..dates import total_experience
from ..logging_utils import LOG
from ..models import StructuredCV, as_profile, as_structured_cv
from ..options import language_label, level_label
from ..shared import RenderContext, ViewMode
from ..visibility import CONTACT, PHOTO, ModeVisibility, VisibilityPolicy
from .base import CVRenderer
from .view import (
    ANONYMOUS_BANNER,
    CURRENT_BADGE,
    MAX_EXPERIENCE_TAGS,
    UNKNOWN_JOB_TITLE,
    Header,
    PreviewView,
    Row,
    Section,
    experience_label,
    make_section,
)


def _year(value: Optional[int]) -> str:
    return str(value) if value else ""


def _non_empty(values: List[str]) -> List[str]:
    return [v for v in values if v]


def experience_rows(view: CVView, max_tags: Optional[int] = MAX_EXPERIENCE_TAGS) -> List[Row]:
    rows = []
    for exp in view.experiences:
        tags = exp.skills if max_tags is None else exp.skills[:max_tags]
        rows.append(Row(
            primary=exp.job_title.strip() or UNKNOWN_JOB_TITLE,
            secondary=exp.company_display,
            meta=_non_empty([exp.location_display, exp.period, exp.duration]),
            body=exp.description,
            tags=list(tags),
            more_tags=len(exp.skills) - len(tags),
            badge=CURRENT_BADGE if exp.is_current else "",
        ))
    return rows


def formation_rows(view: CVView) -> List[Row]:
    return [
        Row(
            primary=form.diploma_display,
            secondary=form.school_display,
            meta=_non_empty([form.location_display, _year(form.year), form.mention_label]),
        )
        for form in view.formations
    ]


def language_rows(languages) -> List[Row]:
    return [
        Row(primary=language_label(lang.language), secondary=level_label(lang.level))
        for lang in languages
        if lang.language
    ]


def contact_lines(email: str, phone: str) -> List[str]:
    return _non_empty([(email or "").strip(), (phone or "").strip()])


def build_sections(
    view: CVView,
    policy: VisibilityPolicy,
    max_tags: Optional[int] = MAX_EXPERIENCE_TAGS,
) -> List[Section]:
    """Sections in display order; empty ones are dropped."""
    candidates = [
        make_section("summary", [Row(body=view.summary)] if view.summary.strip() else []),
        make_section("experiences", experience_rows(view, max_tags)),
        make_section("formations", formation_rows(view)),
        make_section("skills", [Row(primary=s) for s in view.skills if s]),
        make_section("software", [Row(primary=s) for s in view.software if s]),
        make_section("certifications", [
            Row(primary=cert.name, meta=_non_empty([_year(cert.year)]))
            for cert in view.certifications
            if cert.name
        ]),
        make_section("languages", language_rows(view.languages)),
    ]
    if policy.is_visible(CONTACT) and isinstance(view, FullView):
        lines = contact_lines(view.contact_email, view.contact_phone)
        candidates.append(make_section("contact", [Row(primary=line) for line in lines]))
    return [s for s in candidates if s is not None]


def render_preview(
    cv: Any,
    profile: Any = None,
    mode: Any = ViewMode.ANONYMOUS,
    show_toggle: bool = True,
    now: Optional[date] = None,
    max_tags: Optional[int] = MAX_EXPERIENCE_TAGS,
) -> PreviewView:
    """
    Render the interactive preview of a general CV.

    A missing CV yields the explicit empty view instead of raising. Experience
    rows carry at most ``max_tags`` skill tags (None for all of them).
    """
    structured: Optional[StructuredCV] = as_structured_cv(cv)
    if structured is None:
        return PreviewView.empty_view(show_toggle)

    mode = ViewMode.coerce(mode)
    now = now or date.today()
    profile = as_profile(profile)
    policy = ModeVisibility(mode)
    view = project(structured, profile, mode, now)

    total = total_experience(structured.experiences, now)
    score = completeness(structured)
    contacts: List[str] = []
    if policy.is_visible(CONTACT) and isinstance(view, FullView):
        contacts = contact_lines(view.contact_email, view.contact_phone)

    header = Header(
        display_name=view.display_name,
        initials=view.initials,
        title=view.profession_title,
        location=view.location,
        experience=experience_label(total),
        photo_url=profile.photo_url if policy.is_visible(PHOTO) else "",
        completeness_percent=score.percent,
        contacts=contacts,
    )
    return PreviewView(
        mode=mode,
        show_toggle=show_toggle,
        header=header,
        sections=build_sections(view, policy, max_tags),
        banner=ANONYMOUS_BANNER if mode is ViewMode.ANONYMOUS else "",
    )


class CVPreview:
    """
    Preview with a local anonymous/full toggle.

    Every toggle re-projects the CV; when the toggle is disabled the mode is
    fixed to the initial one.
    """

    def __init__(self, cv: Any, profile: Any = None, mode: Any = ViewMode.ANONYMOUS,
                 show_toggle: bool = True, now: Optional[date] = None):
        self.cv = cv
        self.profile = profile
        self.mode = ViewMode.coerce(mode)
        self.show_toggle = show_toggle
        self.now = now

    def set_mode(self, mode: Any) -> PreviewView:
        if not self.show_toggle:
            LOG.debug("Preview toggle disabled, staying in %s mode", self.mode.value)
        else:
            self.mode = ViewMode.coerce(mode)
        return self.view()

    def view(self) -> PreviewView:
        return render_preview(self.cv, self.profile, self.mode, self.show_toggle, self.now)


class PreviewCVRenderer(CVRenderer):
    """Interactive preview of a general CV (anonymous or full view model)."""

    def render(self, cv_data: Any, profile: Any = None, context: Optional[RenderContext] = None) -> PreviewView:
        context = context or RenderContext()
        return render_preview(cv_data, profile, context.mode, context.show_toggle, context.resolved_now())
