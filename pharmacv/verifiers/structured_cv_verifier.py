"""
Shape verifier for structured CV data.

Rendering tolerates malformed input; this verifier reports it so that bad
records can be fixed at the source.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..dates import parse_year_month
from ..options import (
    ANIMATION_SPECIALTIES,
    ANIMATOR_MISSION_TYPES,
    COMPANY_SIZES,
    COMPANY_TYPES,
    DIPLOMA_MENTIONS,
    DIPLOMA_TYPES,
    LANGUAGE_LEVELS,
    MISSION_COUNT_RANGES,
    PHARMACY_TYPES_FOR_MISSIONS,
)
from ..shared import VerificationResult
from .base import CVVerifier

_STANDARD_STRINGS = ("summary", "profession_title", "current_city", "current_region",
                     "contact_email", "contact_phone")
_STANDARD_LISTS = ("experiences", "formations", "skills", "software", "certifications", "languages")
_ANIMATOR_STRINGS = ("summary", "specialty_title", "current_city", "current_region",
                     "contact_email", "contact_phone")
_ANIMATOR_LISTS = ("brands_experience", "key_missions", "formations", "brand_certifications",
                   "animation_specialties", "software", "languages", "mobility_zones")
_STRING_LISTS = ("skills", "software", "animation_specialties", "mobility_zones")

# (list field, item field, option table)
_ENUM_FIELDS: List[Tuple[str, str, Sequence[Sequence]]] = [
    ("experiences", "company_type", COMPANY_TYPES),
    ("experiences", "company_size", COMPANY_SIZES),
    ("formations", "diploma_type", DIPLOMA_TYPES),
    ("formations", "mention", DIPLOMA_MENTIONS),
    ("languages", "level", LANGUAGE_LEVELS),
    ("key_missions", "mission_type", ANIMATOR_MISSION_TYPES),
    ("key_missions", "pharmacy_type", PHARMACY_TYPES_FOR_MISSIONS),
    ("brands_experience", "mission_count", MISSION_COUNT_RANGES),
]


def _known(options: Sequence[Sequence]) -> set:
    return {row[0] for row in options}


class StructuredCVVerifier(CVVerifier):
    """
    Checks field types, YYYY-MM dates, enum keys and id uniqueness of a CV dict.
    """

    def verify(self, data: Any, **kwargs) -> VerificationResult:
        if not isinstance(data, dict):
            return VerificationResult(ok=False, errors=["CV data must be an object"], warnings=[])

        errs: List[str] = []
        warns: List[str] = []
        animator = data.get("cv_type") == "animator"
        strings = _ANIMATOR_STRINGS if animator else _STANDARD_STRINGS
        lists = _ANIMATOR_LISTS if animator else _STANDARD_LISTS

        for name in strings:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                errs.append(f"{name} must be a string")

        for name in lists:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, list):
                errs.append(f"{name} must be an array")
                continue
            if name in _STRING_LISTS and not all(isinstance(v, str) for v in value):
                errs.append(f"{name} items must be strings")

        self._check_experiences(self._objects(data, "experiences", errs), errs, warns)
        self._check_enums(data, warns)
        if animator:
            self._check_specialties(data, warns)
        for name in lists:
            if name not in _STRING_LISTS:
                self._check_ids(name, self._objects(data, name, errs), errs)

        return VerificationResult(ok=not errs, errors=errs, warnings=warns)

    def _objects(self, data: Dict[str, Any], name: str, errs: Optional[List[str]] = None) -> List[Tuple[int, Dict[str, Any]]]:
        value = data.get(name)
        if not isinstance(value, list):
            return []
        items = []
        for idx, item in enumerate(value):
            if isinstance(item, dict):
                items.append((idx, item))
            elif errs is not None and not (name == "certifications" and isinstance(item, str)):
                message = f"{name}[{idx}] must be an object"
                if message not in errs:
                    errs.append(message)
        return items

    def _check_experiences(self, experiences: Iterable[Tuple[int, Dict[str, Any]]],
                           errs: List[str], warns: List[str]) -> None:
        for idx, exp in experiences:
            start = exp.get("start_date")
            if start and parse_year_month(start) is None:
                errs.append(f"experiences[{idx}].start_date is not YYYY-MM: {start!r}")
            elif not start:
                warns.append(f"experiences[{idx}] has no start_date")
            end = exp.get("end_date")
            if end and parse_year_month(end) is None:
                errs.append(f"experiences[{idx}].end_date is not YYYY-MM: {end!r}")
            if exp.get("is_current") and end:
                warns.append(f"experiences[{idx}] is current but has an end_date (ignored)")
            skills = exp.get("skills")
            if skills is not None and not isinstance(skills, list):
                errs.append(f"experiences[{idx}].skills must be an array")

    def _check_enums(self, data: Dict[str, Any], warns: List[str]) -> None:
        for list_name, item_field, options in _ENUM_FIELDS:
            known = _known(options)
            for idx, item in self._objects(data, list_name):
                value = item.get(item_field)
                if isinstance(value, str) and value and value not in known:
                    warns.append(f"{list_name}[{idx}].{item_field} unknown value: {value!r}")

    def _check_specialties(self, data: Dict[str, Any], warns: List[str]) -> None:
        known = _known(ANIMATION_SPECIALTIES)
        specialties = data.get("animation_specialties")
        if isinstance(specialties, list):
            for value in specialties:
                if isinstance(value, str) and value not in known:
                    warns.append(f"animation_specialties unknown value: {value!r}")

    def _check_ids(self, name: str, items: Iterable[Tuple[int, Dict[str, Any]]], errs: List[str]) -> None:
        seen: Dict[str, int] = {}
        for idx, item in items:
            item_id = item.get("id")
            if item_id is None:
                continue
            key = str(item_id)
            if key in seen:
                errs.append(f"{name}[{idx}] duplicates id {item_id!r} of {name}[{seen[key]}]")
            else:
                seen[key] = idx
