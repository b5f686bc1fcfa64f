"""
CV projections and derived metrics.

``anonymize`` builds the public view of a structured CV: company names are
replaced by a structure label, cities collapse to regions, school names
disappear and free text goes through the PII scrub. ``full_view`` builds the
unrestricted view. Both views expose the same display attributes, so
renderers never need to read raw fields; only the full variants carry them.

Skills, software, certifications and languages are not considered
identifying and pass through unchanged. Projections are derived on every
read and never persisted; inputs are never mutated.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional, Sequence, Union

from . import identity
from .dates import experience_months, format_duration, format_period
from .models import (
    Certification,
    Experience,
    Formation,
    LanguageSkill,
    Profile,
    StructuredCV,
    as_profile,
    as_structured_cv,
)
from .options import anonymous_company_label, company_size_label, diploma_label, mention_label
from .scrub import mask_terms, scrub_personal_info
from .shared import ViewMode, join_non_empty

DEFAULT_LOCATION = "France"
DEFAULT_PROFESSION_TITLE = "Professionnel de santé"
ANONYMOUS_SCHOOL_LABEL = "Formation pharmaceutique"
NOT_PROVIDED = "Non renseigné"
DEFAULT_DIPLOMA_LABEL = "Diplôme"

# ------------------------- Projected records -------------------------

@dataclass(frozen=True)
class ExperienceDisplay:
    id: Optional[str]
    job_title: str
    company_display: str
    company_size: Optional[str]
    company_size_label: str
    location_display: str
    period: str
    duration: str
    description: str
    skills: List[str]
    is_current: bool


@dataclass(frozen=True)
class AnonymousExperience(ExperienceDisplay):
    """Experience as shown before a match; carries no raw identifying field."""


@dataclass(frozen=True)
class FullExperience(ExperienceDisplay):
    company_name: str = ""
    company_type: Optional[str] = None
    city: str = ""
    region: str = ""


@dataclass(frozen=True)
class FormationDisplay:
    id: Optional[str]
    diploma_type: Optional[str]
    diploma_name: str
    diploma_display: str
    school_display: str
    location_display: str
    year: Optional[int]
    mention: Optional[str]
    mention_label: str


@dataclass(frozen=True)
class AnonymousFormation(FormationDisplay):
    """Formation without school name or city."""


@dataclass(frozen=True)
class FullFormation(FormationDisplay):
    school_name: str = ""
    school_city: str = ""
    school_region: str = ""


@dataclass(frozen=True)
class CVView:
    mode: ViewMode
    display_name: str
    initials: str
    profession_title: str
    location: str
    summary: str
    experiences: List[ExperienceDisplay]
    formations: List[FormationDisplay]
    skills: List[str]
    software: List[str]
    certifications: List[Certification]
    languages: List[LanguageSkill]

    @property
    def anonymous(self) -> bool:
        return self.mode is ViewMode.ANONYMOUS


@dataclass(frozen=True)
class AnonymousView(CVView):
    """Holds only AnonymousExperience / AnonymousFormation records."""


@dataclass(frozen=True)
class FullView(CVView):
    """Holds FullExperience / FullFormation records and the CV contacts."""
    contact_email: str = ""
    contact_phone: str = ""
    photo_url: str = ""


@dataclass(frozen=True)
class Completeness:
    percent: int
    missing: List[str]

# ------------------------- Field helpers -------------------------

def profession_title(cv: StructuredCV) -> str:
    if cv.profession_title.strip():
        return cv.profession_title.strip()
    if cv.experiences and cv.experiences[0].job_title.strip():
        return cv.experiences[0].job_title.strip()
    return DEFAULT_PROFESSION_TITLE


def anonymous_location(cv: StructuredCV, profile: Profile) -> str:
    return cv.current_region.strip() or profile.current_region.strip() or DEFAULT_LOCATION


def full_location(cv: StructuredCV, profile: Profile) -> str:
    if cv.current_city.strip():
        return join_non_empty([cv.current_city, cv.current_region])
    if profile.current_city.strip():
        return join_non_empty([profile.current_city, profile.current_region])
    return cv.current_region.strip() or profile.current_region.strip() or DEFAULT_LOCATION


def _identifying_terms(cv: StructuredCV) -> List[str]:
    terms = [exp.company_name for exp in cv.experiences]
    terms.extend(form.school_name for form in cv.formations)
    return [t for t in terms if t and t.strip()]


def _public_text(text: str, terms: Sequence[str]) -> str:
    return mask_terms(scrub_personal_info(text), terms)


def _diploma_display(form: Formation) -> str:
    if form.diploma_name.strip():
        return form.diploma_name.strip()
    if form.diploma_type:
        return diploma_label(form.diploma_type)
    return DEFAULT_DIPLOMA_LABEL


def _experience_common(exp: Experience, now: date) -> dict:
    months = experience_months(exp.start_date, exp.end_date, exp.is_current, now)
    return dict(
        id=exp.id,
        job_title=exp.job_title,
        company_size=exp.company_size,
        company_size_label=company_size_label(exp.company_size),
        period=format_period(exp.start_date, exp.end_date, exp.is_current),
        duration=format_duration(months),
        skills=list(exp.skills),
        is_current=exp.is_current,
    )


def anonymize_experience(exp: Experience, now: date, terms: Sequence[str] = ()) -> AnonymousExperience:
    common = _experience_common(exp, now)
    # Job titles such as "Responsable parapharmacie Leclerc" name the employer
    common["job_title"] = mask_terms(exp.job_title, terms)
    return AnonymousExperience(
        company_display=anonymous_company_label(exp.company_type),
        location_display=exp.region.strip() or DEFAULT_LOCATION,
        description=_public_text(exp.description, terms),
        **common,
    )


def full_experience(exp: Experience, now: date) -> FullExperience:
    company = exp.company_name.strip()
    if exp.city.strip():
        location = join_non_empty([exp.city, exp.region])
    else:
        location = exp.region.strip() or DEFAULT_LOCATION
    return FullExperience(
        company_display=company or anonymous_company_label(exp.company_type),
        location_display=location,
        description=exp.description,
        company_name=exp.company_name,
        company_type=exp.company_type,
        city=exp.city,
        region=exp.region,
        **_experience_common(exp, now),
    )


def _formation_common(form: Formation) -> dict:
    return dict(
        id=form.id,
        diploma_type=form.diploma_type,
        diploma_name=form.diploma_name,
        diploma_display=_diploma_display(form),
        year=form.year,
        mention=form.mention,
        mention_label=mention_label(form.mention),
    )


def anonymize_formation(form: Formation, terms: Sequence[str] = ()) -> AnonymousFormation:
    common = _formation_common(form)
    common["diploma_name"] = mask_terms(form.diploma_name, terms)
    common["diploma_display"] = mask_terms(common["diploma_display"], terms)
    return AnonymousFormation(
        school_display=ANONYMOUS_SCHOOL_LABEL,
        location_display=form.school_region.strip() or DEFAULT_LOCATION,
        **common,
    )


def full_formation(form: Formation) -> FullFormation:
    return FullFormation(
        school_display=form.school_name.strip() or NOT_PROVIDED,
        location_display=form.school_city.strip() or form.school_region.strip() or DEFAULT_LOCATION,
        school_name=form.school_name,
        school_city=form.school_city,
        school_region=form.school_region,
        **_formation_common(form),
    )

# ------------------------- Projections -------------------------

CVInput = Union[StructuredCV, dict, None]


def anonymize(cv: CVInput, profile: Any = None, now: Optional[date] = None) -> Optional[AnonymousView]:
    """Public projection of ``cv``; ``None`` when there is no CV."""
    cv = as_structured_cv(cv)
    if cv is None:
        return None
    profile = as_profile(profile)
    now = now or date.today()
    terms = _identifying_terms(cv)

    return AnonymousView(
        mode=ViewMode.ANONYMOUS,
        display_name=identity.display_name(profile, anonymous=True),
        initials=identity.initials(profile, anonymous=True),
        profession_title=mask_terms(profession_title(cv), terms),
        location=anonymous_location(cv, profile),
        summary=_public_text(cv.summary, terms),
        experiences=[anonymize_experience(exp, now, terms) for exp in cv.experiences],
        formations=[anonymize_formation(form, terms) for form in cv.formations],
        skills=list(cv.skills),
        software=list(cv.software),
        certifications=list(cv.certifications),
        languages=list(cv.languages),
    )


def full_view(cv: CVInput, profile: Any = None, now: Optional[date] = None) -> Optional[FullView]:
    """Unrestricted projection: raw fields plus the full identity and location."""
    cv = as_structured_cv(cv)
    if cv is None:
        return None
    profile = as_profile(profile)
    now = now or date.today()

    return FullView(
        mode=ViewMode.FULL,
        display_name=identity.display_name(profile, anonymous=False),
        initials=identity.initials(profile, anonymous=False),
        profession_title=profession_title(cv),
        location=full_location(cv, profile),
        summary=cv.summary,
        experiences=[full_experience(exp, now) for exp in cv.experiences],
        formations=[full_formation(form) for form in cv.formations],
        skills=list(cv.skills),
        software=list(cv.software),
        certifications=list(cv.certifications),
        languages=list(cv.languages),
        contact_email=cv.contact_email,
        contact_phone=cv.contact_phone,
        photo_url=profile.photo_url,
    )


def project(cv: CVInput, profile: Any = None, mode: Any = ViewMode.ANONYMOUS,
            now: Optional[date] = None) -> Optional[CVView]:
    if ViewMode.coerce(mode) is ViewMode.FULL:
        return full_view(cv, profile, now)
    return anonymize(cv, profile, now)

# ------------------------- Metrics -------------------------

# (attribute, label, weight, minimum items; None for text fields)
COMPLETENESS_CHECKS = [
    ("summary", "Résumé", 10, None),
    ("experiences", "Expériences", 30, 1),
    ("formations", "Formations", 20, 1),
    ("skills", "Compétences", 20, 3),
    ("software", "Logiciels", 10, 1),
    ("certifications", "Certifications", 5, 1),
    ("languages", "Langues", 5, 1),
]


def completeness(cv: CVInput) -> Completeness:
    """Weighted checklist over the seven canonical sections."""
    cv = as_structured_cv(cv)
    total_weight = sum(weight for _, _, weight, _ in COMPLETENESS_CHECKS)
    if cv is None:
        return Completeness(percent=0, missing=[label for _, label, _, _ in COMPLETENESS_CHECKS])

    earned = 0
    missing: List[str] = []
    for attr, label, weight, min_items in COMPLETENESS_CHECKS:
        value = getattr(cv, attr)
        if min_items is None:
            present = bool(value and value.strip())
        else:
            present = len(value) >= min_items
        if present:
            earned += weight
        else:
            missing.append(label)

    return Completeness(percent=round(100 * earned / total_weight), missing=missing)


def extract_main_skills(cv: CVInput, max_skills: int = 5) -> List[str]:
    """Most frequent skills across experiences and the global list."""
    cv = as_structured_cv(cv)
    if cv is None:
        return []
    counts: Counter = Counter()
    for exp in cv.experiences:
        counts.update(exp.skills)
    counts.update(cv.skills)
    # Counter.most_common keeps first-seen order between equal counts
    return [skill for skill, _ in counts.most_common(max_skills)]
