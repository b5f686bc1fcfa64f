"""
Field-visibility policies consumed by the renderers.

The general CV has one anonymous/full switch, the animator CV has three
independent flags stored on the CV itself. Both answer the same question.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .shared import ViewMode

PHOTO = "photo"
RATING = "rating"
CONTACT = "contact"
FULL_NAME = "full_name"
EXACT_LOCATION = "exact_location"
ORGANIZATIONS = "organizations"

FIELD_IDS = (PHOTO, RATING, CONTACT, FULL_NAME, EXACT_LOCATION, ORGANIZATIONS)


class VisibilityPolicy(ABC):

    @abstractmethod
    def is_visible(self, field_id: str) -> bool:
        """Whether ``field_id`` may be shown. Unknown ids are hidden."""
        ...


class ModeVisibility(VisibilityPolicy):
    """Everything identifying is visible in full mode, nothing in anonymous mode."""

    def __init__(self, mode: Any = ViewMode.ANONYMOUS):
        self.mode = ViewMode.coerce(mode)

    def is_visible(self, field_id: str) -> bool:
        if field_id not in FIELD_IDS:
            return False
        if field_id == RATING:
            return True
        return self.mode is ViewMode.FULL


class AnimatorVisibility(VisibilityPolicy):
    """
    Per-section flags of an animator CV.

    Identity, exact location and brand names are always public for
    animators; photo, rating and contact follow their own flags.
    """

    def __init__(self, show_photo: bool = False, show_rating: bool = True, show_contact: bool = False):
        self._flags = {
            PHOTO: bool(show_photo),
            RATING: bool(show_rating),
            CONTACT: bool(show_contact),
            FULL_NAME: True,
            EXACT_LOCATION: True,
            ORGANIZATIONS: True,
        }

    @classmethod
    def from_cv(cls, cv: Any) -> "AnimatorVisibility":
        return cls(
            show_photo=getattr(cv, "show_photo", False),
            show_rating=getattr(cv, "show_rating", True),
            show_contact=getattr(cv, "show_contact", False),
        )

    def is_visible(self, field_id: str) -> bool:
        return self._flags.get(field_id, False)
