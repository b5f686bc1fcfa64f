"""
Preview of an animator CV.

There is no anonymous/full switch: photo, rating and contact are governed by
flags stored on the CV and evaluated here at render time.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .. import identity
from ..models import AnimatorCV, BrandExperience, KeyMission, RatingData, as_animator_cv, as_profile
from ..options import (
    diploma_label,
    mention_label,
    mission_count_label,
    mission_type_icon,
    mission_type_label,
    pharmacy_type_label,
    specialty_label,
)
from ..shared import RenderContext, join_non_empty
from ..visibility import CONTACT, FULL_NAME, PHOTO, RATING, AnimatorVisibility, VisibilityPolicy
from .base import CVRenderer
from .preview import language_rows
from .view import RECRUITER_VIEW_BANNER, Header, PreviewView, Row, Section, make_section

ANIMATOR_PLACEHOLDER = "Animateur(trice)"
CONTACT_LOCKED = "Disponible après match"
RATING_PENDING = "Visible sur le CV publié"
VEHICLE_LABEL = "Véhicule personnel"


def brand_years_label(years: Optional[int]) -> str:
    if years is None:
        return ""
    if years >= 10:
        amount = "10+"
    elif years < 1:
        amount = "< 1"
    else:
        amount = str(years)
    return f"{amount} an{'s' if years > 1 else ''}"


def rating_label(rating: Optional[RatingData]) -> str:
    if rating is None:
        return RATING_PENDING
    average = f"{rating.average_rating:.1f}" if rating.average_rating is not None else "-"
    count = rating.missions_completed
    return f"{average}/5 • {count} mission{'s' if count > 1 else ''}"


def _amount(value: Optional[float]) -> str:
    if value is None:
        return "?"
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def animator_location(cv: AnimatorCV, profile) -> str:
    city = cv.current_city.strip() or profile.current_city.strip()
    region = cv.current_region.strip() or profile.current_region.strip()
    if city:
        return join_non_empty([city, region])
    return region or "France"


def _brand_row(brand: BrandExperience) -> Row:
    return Row(
        primary=brand.brand,
        badge=brand_years_label(brand.years),
        meta=[mission_count_label(brand.mission_count)] if brand.mission_count else [],
        tags=[specialty_label(s) for s in brand.specialties],
        body=brand.description,
    )


def _mission_row(mission: KeyMission) -> Row:
    meta = [
        pharmacy_type_label(mission.pharmacy_type) if mission.pharmacy_type else "",
        mission.city,
        mission.date,
    ]
    return Row(
        primary=mission_type_label(mission.mission_type),
        icon=mission_type_icon(mission.mission_type),
        secondary=mission.brand,
        meta=[m for m in meta if m],
        body=mission.description,
        note=mission.results,
    )


def _formation_rows(cv: AnimatorCV) -> List[Row]:
    rows = []
    for form in cv.formations:
        primary = diploma_label(form.diploma_type) if form.diploma_type else form.diploma_name
        meta = [form.school_name, str(form.year) if form.year else "", mention_label(form.mention)]
        rows.append(Row(
            primary=primary,
            secondary=form.diploma_name if form.diploma_type and form.diploma_name else "",
            meta=[m for m in meta if m],
        ))
    return rows


def _rates_rows(cv: AnimatorCV) -> List[Row]:
    if not cv.daily_rate_min and not cv.mobility_zones:
        return []
    rows = []
    if cv.daily_rate_min:
        rows.append(Row(
            primary=f"{_amount(cv.daily_rate_min)}€ - {_amount(cv.daily_rate_max)}€ / jour",
            icon="briefcase",
        ))
    if cv.mobility_zones:
        rows.append(Row(primary=", ".join(cv.mobility_zones), icon="map"))
    if cv.has_vehicle:
        rows.append(Row(primary=VEHICLE_LABEL, icon="checkCircle"))
    return rows


def _contact_section(cv: AnimatorCV, policy: VisibilityPolicy) -> Section:
    if policy.is_visible(CONTACT):
        rows = []
        if cv.contact_email.strip():
            rows.append(Row(primary=cv.contact_email.strip(), icon="mail"))
        if cv.contact_phone.strip():
            rows.append(Row(primary=cv.contact_phone.strip(), icon="phone"))
    else:
        rows = [Row(primary=CONTACT_LOCKED, icon="lock")]
    # Always shown, even without rows
    return Section(name="contact", label="Contact", rows=rows)


def render_animator_preview(
    cv: Any,
    profile: Any = None,
    rating: Optional[RatingData] = None,
    show_toggle: bool = True,
) -> PreviewView:
    animator = as_animator_cv(cv)
    if animator is None:
        return PreviewView.empty_view(show_toggle)

    profile = as_profile(profile)
    policy = AnimatorVisibility.from_cv(animator)

    name = identity.display_name(profile, anonymous=not policy.is_visible(FULL_NAME))
    if name == identity.PLACEHOLDER_NAME:
        name = ANIMATOR_PLACEHOLDER

    header = Header(
        display_name=name,
        initials=identity.initials(profile, anonymous=not policy.is_visible(FULL_NAME)),
        title=animator.specialty_title.strip(),
        location=animator_location(animator, profile),
        photo_url=profile.photo_url if policy.is_visible(PHOTO) else "",
    )

    candidates = [
        make_section("rating", [Row(primary=rating_label(rating), icon="star")])
        if policy.is_visible(RATING) else None,
        make_section("summary", [Row(body=animator.summary)] if animator.summary.strip() else []),
        make_section("brands", [_brand_row(b) for b in animator.brands_experience]),
        make_section("key_missions", [_mission_row(m) for m in animator.key_missions]),
        make_section("formations", _formation_rows(animator)),
        make_section("brand_certifications", [
            Row(primary=f"{c.brand} - {c.certification_name}", meta=[str(c.year)] if c.year else [])
            for c in animator.brand_certifications
        ]),
        make_section("specialties", [Row(primary=specialty_label(s)) for s in animator.animation_specialties]),
        make_section("software", [Row(primary=s) for s in animator.software if s]),
        make_section("languages", language_rows(animator.languages)),
        make_section("rates_mobility", _rates_rows(animator)),
        _contact_section(animator, policy),
    ]

    return PreviewView(
        mode=None,
        show_toggle=show_toggle,
        header=header,
        sections=[s for s in candidates if s is not None],
        banner=RECRUITER_VIEW_BANNER if show_toggle else "",
    )


class AnimatorPreviewRenderer(CVRenderer):
    """Preview of an animator CV (photo, rating and contact governed by CV flags)."""

    def render(self, cv_data: Any, profile: Any = None, context: Optional[RenderContext] = None) -> PreviewView:
        context = context or RenderContext()
        return render_animator_preview(cv_data, profile, context.rating, context.show_toggle)
