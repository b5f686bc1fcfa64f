"""
HTML document export.

Renders the printable CV through a Jinja2 template with autoescape. The
document is built from the same projection and section rows as the
interactive preview, so both agree on every masking decision; only contacts
differ, since the export receives them from the caller.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..anonymizer import FullView, project
from ..dates import format_day, total_experience
from ..models import Profile, as_profile, as_structured_cv
from ..shared import RenderContext, ViewMode
from ..visibility import PHOTO, ModeVisibility
from .base import CVRenderer
from .preview import build_sections
from .view import CALLER_SUPPLIED_SECTIONS, CURRENT_BADGE, experience_label

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "cv_export.html"

THEME_COLORS: Dict[str, str] = {
    "primary": "#009B72",
    "secondary": "#2E7D8F",
    "text": "#2D3748",
    "text_light": "#718096",
    "border": "#E2E8F0",
    "background": "#F5F7FA",
    "white": "#FFFFFF",
}

ANONYMOUS_NOTICE = "CV anonymisé - Les noms d'entreprises, écoles et villes exactes sont masqués"
ANONYMOUS_BADGE = "CV Anonyme"
FULL_BADGE = "CV Complet"
FOOTER_TEXT = "CV généré via Pharma Link"

BRAND_MARK_SVG = Markup(
    '<svg class="brand-mark" xmlns="http://www.w3.org/2000/svg" width="28" height="28" '
    'viewBox="0 0 28 28" aria-label="Pharma Link">'
    '<rect x="0" y="0" width="28" height="28" rx="7" fill="{primary}"/>'
    '<rect x="11" y="5" width="6" height="18" rx="1.5" fill="#FFFFFF"/>'
    '<rect x="5" y="11" width="18" height="6" rx="1.5" fill="#FFFFFF"/>'
    "</svg>".format(primary=THEME_COLORS["primary"])
)

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def export_contacts(anonymous: bool, email: Optional[str], profile: Profile) -> List[str]:
    """Contacts appear only in full mode, and only those the caller supplied."""
    if anonymous:
        return []
    return [c for c in ((email or "").strip(), profile.phone.strip()) if c]


def generate_cv_html(
    cv: Any,
    profile: Any = None,
    anonymous: bool = False,
    title: Optional[str] = None,
    email: Optional[str] = None,
    now: Optional[date] = None,
) -> str:
    """
    Render the printable HTML document of a general CV.

    Args:
        cv: StructuredCV or its dict form; ``None`` returns an empty string
        profile: Profile model or dict
        anonymous: Anonymous projection when True
        title: Document title, defaults to "CV - <display name>"
        email: Contact email supplied by the caller (full mode only)
        now: Reference date for durations and the footer

    Returns:
        The complete HTML document
    """
    structured = as_structured_cv(cv)
    if structured is None:
        return ""

    now = now or date.today()
    profile = as_profile(profile)
    mode = ViewMode.coerce(bool(anonymous))
    policy = ModeVisibility(mode)
    view = project(structured, profile, mode, now)

    sections = {
        s.name: s
        for s in build_sections(view, policy, max_tags=None)
        if s.name not in CALLER_SUPPLIED_SECTIONS
    }
    photo_url = ""
    if policy.is_visible(PHOTO) and isinstance(view, FullView):
        photo_url = view.photo_url

    template = env.get_template(TEMPLATE_NAME)
    return template.render(
        colors=THEME_COLORS,
        document_title=title or f"CV - {view.display_name}",
        anonymous=mode.anonymous,
        notice=ANONYMOUS_NOTICE,
        badge=ANONYMOUS_BADGE if mode.anonymous else FULL_BADGE,
        current_badge=CURRENT_BADGE,
        brand_mark=BRAND_MARK_SVG,
        name=view.display_name,
        profession_title=view.profession_title,
        location=view.location,
        experience=experience_label(total_experience(structured.experiences, now)),
        contacts=export_contacts(mode.anonymous, email, profile),
        photo_url=photo_url,
        sections=sections,
        footer=f"{FOOTER_TEXT} • {format_day(now)}",
    )


class HtmlCVRenderer(CVRenderer):
    """Printable HTML document (Jinja2 template, autoescaped)."""

    def render(self, cv_data: Any, profile: Any = None, context: Optional[RenderContext] = None) -> str:
        context = context or RenderContext()
        return generate_cv_html(
            cv_data,
            profile,
            anonymous=ViewMode.coerce(context.mode).anonymous,
            title=context.title,
            email=context.email,
            now=context.resolved_now(),
        )
