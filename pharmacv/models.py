"""
Structured CV data model.

The persistence layer hands over already-deserialized JSON. ``from_dict``
constructors only perform absence/type checks: missing or null values fall
back to empty defaults and never raise.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

# ------------------------- Coercion helpers -------------------------

def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}

def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)

def _opt_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)

def _bool(data: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = data.get(key)
    if value is None:
        return default
    return bool(value)

def _int(data: Mapping[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None

def _float(data: Mapping[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # json.loads turns 1e400 into inf and accepts NaN
    return number if math.isfinite(number) else None

def _str_list(data: Mapping[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [v if isinstance(v, str) else str(v) for v in value if v is not None]

def _items(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in value if v is not None]

# ------------------------- Profile -------------------------

@dataclass(frozen=True)
class Profile:
    """User profile, read-only for the CV pipeline."""
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    current_city: str = ""
    current_region: str = ""
    photo_url: str = ""
    phone: str = ""
    bio: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        data = _mapping(data)
        return cls(
            first_name=_str(data, "first_name"),
            last_name=_str(data, "last_name"),
            nickname=_str(data, "nickname"),
            current_city=_str(data, "current_city"),
            current_region=_str(data, "current_region"),
            photo_url=_str(data, "photo_url"),
            phone=_str(data, "phone"),
            bio=_str(data, "bio"),
        )

@dataclass(frozen=True)
class RatingData:
    average_rating: Optional[float] = None
    missions_completed: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "RatingData":
        data = _mapping(data)
        return cls(
            average_rating=_float(data, "average_rating"),
            missions_completed=_int(data, "missions_completed") or 0,
        )

# ------------------------- General CV -------------------------

@dataclass(frozen=True)
class Experience:
    id: Optional[str] = None
    job_title: str = ""
    company_name: str = ""
    company_type: Optional[str] = None
    company_size: Optional[str] = None
    city: str = ""
    region: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    is_current: bool = False
    description: str = ""
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Experience":
        data = _mapping(data)
        return cls(
            id=_opt_str(data, "id"),
            job_title=_str(data, "job_title"),
            company_name=_str(data, "company_name"),
            company_type=_opt_str(data, "company_type"),
            company_size=_opt_str(data, "company_size"),
            city=_str(data, "city"),
            region=_str(data, "region"),
            start_date=_str(data, "start_date"),
            end_date=_opt_str(data, "end_date"),
            is_current=_bool(data, "is_current"),
            description=_str(data, "description"),
            skills=_str_list(data, "skills"),
        )

@dataclass(frozen=True)
class Formation:
    id: Optional[str] = None
    diploma_type: Optional[str] = None
    diploma_name: str = ""
    school_name: str = ""
    school_city: str = ""
    school_region: str = ""
    year: Optional[int] = None
    mention: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Formation":
        data = _mapping(data)
        return cls(
            id=_opt_str(data, "id"),
            diploma_type=_opt_str(data, "diploma_type"),
            diploma_name=_str(data, "diploma_name"),
            school_name=_str(data, "school_name"),
            school_city=_str(data, "school_city"),
            school_region=_str(data, "school_region"),
            year=_int(data, "year"),
            mention=_opt_str(data, "mention"),
        )

@dataclass(frozen=True)
class Certification:
    name: str = ""
    year: Optional[int] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Certification":
        # Older CVs store certifications as bare strings
        if isinstance(data, str):
            return cls(name=data)
        data = _mapping(data)
        return cls(name=_str(data, "name"), year=_int(data, "year"), id=_opt_str(data, "id"))

@dataclass(frozen=True)
class LanguageSkill:
    language: str = ""
    level: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "LanguageSkill":
        data = _mapping(data)
        return cls(language=_str(data, "language"), level=_opt_str(data, "level"))

def _default_languages() -> List[LanguageSkill]:
    return [LanguageSkill(language="francais", level="native")]

@dataclass(frozen=True)
class StructuredCV:
    """Root document of a general (pharmacy staff) CV."""
    summary: str = ""
    profession_title: str = ""
    current_city: str = ""
    current_region: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    experiences: List[Experience] = field(default_factory=list)
    formations: List[Formation] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    software: List[str] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[LanguageSkill] = field(default_factory=list)
    cv_type: str = "standard"

    @classmethod
    def from_dict(cls, data: Any) -> "StructuredCV":
        data = _mapping(data)
        return cls(
            summary=_str(data, "summary"),
            profession_title=_str(data, "profession_title"),
            current_city=_str(data, "current_city"),
            current_region=_str(data, "current_region"),
            contact_email=_str(data, "contact_email"),
            contact_phone=_str(data, "contact_phone"),
            experiences=[Experience.from_dict(e) for e in _items(data, "experiences")],
            formations=[Formation.from_dict(f) for f in _items(data, "formations")],
            skills=_str_list(data, "skills"),
            software=_str_list(data, "software"),
            certifications=[Certification.from_dict(c) for c in _items(data, "certifications")],
            languages=[LanguageSkill.from_dict(lang) for lang in _items(data, "languages")],
            cv_type=_str(data, "cv_type") or "standard",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

# ------------------------- Animator CV -------------------------

@dataclass(frozen=True)
class BrandExperience:
    id: Optional[str] = None
    brand: str = ""
    years: Optional[int] = None
    mission_count: Optional[str] = None
    specialties: List[str] = field(default_factory=list)
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "BrandExperience":
        data = _mapping(data)
        return cls(
            id=_opt_str(data, "id"),
            brand=_str(data, "brand"),
            years=_int(data, "years"),
            mission_count=_opt_str(data, "mission_count"),
            specialties=_str_list(data, "specialties"),
            description=_str(data, "description"),
        )

@dataclass(frozen=True)
class KeyMission:
    id: Optional[str] = None
    source_mission_id: Optional[str] = None
    brand: str = ""
    mission_type: Optional[str] = None
    pharmacy_type: Optional[str] = None
    city: str = ""
    region: str = ""
    date: str = ""
    duration_days: Optional[int] = None
    description: str = ""
    results: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "KeyMission":
        data = _mapping(data)
        return cls(
            id=_opt_str(data, "id"),
            source_mission_id=_opt_str(data, "source_mission_id"),
            brand=_str(data, "brand"),
            mission_type=_opt_str(data, "mission_type"),
            pharmacy_type=_opt_str(data, "pharmacy_type"),
            city=_str(data, "city"),
            region=_str(data, "region"),
            date=_str(data, "date"),
            duration_days=_int(data, "duration_days"),
            description=_str(data, "description"),
            results=_str(data, "results"),
        )

@dataclass(frozen=True)
class BrandCertification:
    id: Optional[str] = None
    brand: str = ""
    certification_name: str = ""
    year: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "BrandCertification":
        data = _mapping(data)
        return cls(
            id=_opt_str(data, "id"),
            brand=_str(data, "brand"),
            certification_name=_str(data, "certification_name"),
            year=_int(data, "year"),
        )

@dataclass(frozen=True)
class AnimatorCV:
    """
    CV of a freelance brand animator.

    Has no global anonymous/full mode: photo, rating and contact are shown
    or hidden by their own flags.
    """
    summary: str = ""
    specialty_title: str = ""
    current_city: str = ""
    current_region: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    brands_experience: List[BrandExperience] = field(default_factory=list)
    key_missions: List[KeyMission] = field(default_factory=list)
    formations: List[Formation] = field(default_factory=list)
    brand_certifications: List[BrandCertification] = field(default_factory=list)
    animation_specialties: List[str] = field(default_factory=list)
    software: List[str] = field(default_factory=list)
    languages: List[LanguageSkill] = field(default_factory=list)
    daily_rate_min: Optional[float] = None
    daily_rate_max: Optional[float] = None
    mobility_zones: List[str] = field(default_factory=list)
    has_vehicle: bool = False
    show_photo: bool = False
    show_rating: bool = True
    show_contact: bool = False
    cv_type: str = "animator"

    @classmethod
    def from_dict(cls, data: Any) -> "AnimatorCV":
        data = _mapping(data)
        return cls(
            summary=_str(data, "summary"),
            specialty_title=_str(data, "specialty_title"),
            current_city=_str(data, "current_city"),
            current_region=_str(data, "current_region"),
            contact_email=_str(data, "contact_email"),
            contact_phone=_str(data, "contact_phone"),
            brands_experience=[BrandExperience.from_dict(b) for b in _items(data, "brands_experience")],
            key_missions=[KeyMission.from_dict(m) for m in _items(data, "key_missions")],
            formations=[Formation.from_dict(f) for f in _items(data, "formations")],
            brand_certifications=[
                BrandCertification.from_dict(c) for c in _items(data, "brand_certifications")
            ],
            animation_specialties=_str_list(data, "animation_specialties"),
            software=_str_list(data, "software"),
            languages=[LanguageSkill.from_dict(lang) for lang in _items(data, "languages")],
            daily_rate_min=_float(data, "daily_rate_min"),
            daily_rate_max=_float(data, "daily_rate_max"),
            mobility_zones=_str_list(data, "mobility_zones"),
            has_vehicle=_bool(data, "has_vehicle"),
            show_photo=_bool(data, "show_photo"),
            show_rating=_bool(data, "show_rating", default=True),
            show_contact=_bool(data, "show_contact"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

# ------------------------- Loading -------------------------

AnyCV = Union[StructuredCV, AnimatorCV]

def load_cv(data: Any) -> Optional[AnyCV]:
    """Build the CV model matching ``cv_type``; ``None`` for absent input."""
    if data is None:
        return None
    if isinstance(data, (StructuredCV, AnimatorCV)):
        return data
    if not isinstance(data, Mapping):
        return None
    if data.get("cv_type") == "animator":
        return AnimatorCV.from_dict(data)
    return StructuredCV.from_dict(data)

def as_structured_cv(data: Any) -> Optional[StructuredCV]:
    if data is None or isinstance(data, StructuredCV):
        return data
    if isinstance(data, Mapping):
        return StructuredCV.from_dict(data)
    return None

def as_animator_cv(data: Any) -> Optional[AnimatorCV]:
    if data is None or isinstance(data, AnimatorCV):
        return data
    if isinstance(data, Mapping):
        return AnimatorCV.from_dict(data)
    return None

def as_profile(data: Any) -> Profile:
    if isinstance(data, Profile):
        return data
    return Profile.from_dict(data)

def empty_cv() -> StructuredCV:
    return StructuredCV(languages=_default_languages())

def empty_animator_cv() -> AnimatorCV:
    return AnimatorCV(languages=_default_languages())
