"""
View-model tree handed to the UI layer: a header plus named sections of rows.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..dates import TotalExperience
from ..shared import ViewMode

EMPTY_MESSAGE = "Aucune donnée CV"
ANONYMOUS_BANNER = "Vue recruteur avant match - Infos masquées"
RECRUITER_VIEW_BANNER = "Vue recruteur"
CURRENT_BADGE = "Actuel"
UNKNOWN_JOB_TITLE = "Poste non renseigné"
MAX_EXPERIENCE_TAGS = 4

SECTION_LABELS: Dict[str, str] = {
    "summary": "À propos",
    "experiences": "Expériences professionnelles",
    "formations": "Formations",
    "skills": "Compétences",
    "software": "Logiciels",
    "certifications": "Certifications",
    "languages": "Langues",
    "contact": "Contact",
    "rating": "Rating PharmaLink",
    "brands": "Marques & Laboratoires",
    "key_missions": "Missions marquantes",
    "brand_certifications": "Certifications marques",
    "specialties": "Spécialités d'animation",
    "rates_mobility": "Tarifs & Mobilité",
}

# Sections fed by data that the document export receives separately
CALLER_SUPPLIED_SECTIONS = ("contact",)


def experience_label(total: TotalExperience) -> str:
    if total.months < 1:
        return total.formatted
    return f"{total.formatted} d'expérience"


@dataclass(frozen=True)
class Row:
    primary: str = ""
    secondary: str = ""
    meta: List[str] = field(default_factory=list)
    body: str = ""
    tags: List[str] = field(default_factory=list)
    more_tags: int = 0
    badge: str = ""
    note: str = ""
    icon: str = ""

    def texts(self) -> List[str]:
        values = [self.primary, self.secondary, *self.meta, self.body, *self.tags, self.badge, self.note]
        return [v for v in values if v]


@dataclass(frozen=True)
class Section:
    name: str
    label: str
    rows: List[Row]


def make_section(name: str, rows: List[Row]) -> Optional[Section]:
    """A section without rows is omitted, never rendered as a placeholder."""
    if not rows:
        return None
    return Section(name=name, label=SECTION_LABELS.get(name, name), rows=rows)


@dataclass(frozen=True)
class Header:
    display_name: str
    initials: str
    title: str = ""
    location: str = ""
    experience: str = ""
    photo_url: str = ""
    completeness_percent: Optional[int] = None
    contacts: List[str] = field(default_factory=list)

    def texts(self) -> List[str]:
        return [v for v in (self.display_name, self.title, self.location, self.experience) if v]


@dataclass(frozen=True)
class PreviewView:
    mode: Optional[ViewMode]
    show_toggle: bool
    header: Optional[Header]
    sections: List[Section]
    banner: str = ""
    empty: bool = False
    empty_message: str = ""

    @classmethod
    def empty_view(cls, show_toggle: bool = False) -> "PreviewView":
        return cls(
            mode=None,
            show_toggle=show_toggle,
            header=None,
            sections=[],
            empty=True,
            empty_message=EMPTY_MESSAGE,
        )

    def section(self, name: str) -> Optional[Section]:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    @property
    def section_names(self) -> List[str]:
        return [s.name for s in self.sections]

    def display_strings(self, include_caller_supplied: bool = False) -> List[str]:
        """
        User-visible strings of the header and the section rows.

        Labels, banners and the completeness badge are presentation details
        and are not included.
        """
        strings: List[str] = []
        if self.header is not None:
            strings.extend(self.header.texts())
            if include_caller_supplied:
                strings.extend(self.header.contacts)
        for section in self.sections:
            if section.name in CALLER_SUPPLIED_SECTIONS and not include_caller_supplied:
                continue
            for row in section.rows:
                strings.extend(row.texts())
        return strings

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value if self.mode is not None else None
        return data
