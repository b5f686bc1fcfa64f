"""
Identity projection: the name and initials shown for a profile.

Public mode:                 "Marie Durand"
Anonymous with a nickname:   "PharmaPro75"
Anonymous without nickname:  "Marie"
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .models import Profile, as_profile

PLACEHOLDER_NAME = "Utilisateur"


def display_name(profile: Any, anonymous: bool = False) -> str:
    if profile is None:
        return PLACEHOLDER_NAME
    profile = as_profile(profile)

    if not anonymous:
        full_name = f"{profile.first_name} {profile.last_name}".strip()
        return full_name or PLACEHOLDER_NAME

    if profile.nickname.strip():
        return profile.nickname.strip()
    return profile.first_name.strip() or PLACEHOLDER_NAME


def display_name_from_privacy(profile: Any, privacy: Optional[Mapping[str, Any]]) -> str:
    """Anonymous unless the privacy settings enable ``show_full_name``."""
    anonymous = not (privacy or {}).get("show_full_name")
    return display_name(profile, anonymous)


def initials(profile: Any, anonymous: bool = False) -> str:
    name = display_name(profile, anonymous)
    parts = name.split()
    if len(parts) >= 2:
        return (parts[0][0] + parts[-1][0]).upper()
    return name.strip()[:2].upper()


__all__ = [
    "PLACEHOLDER_NAME",
    "Profile",
    "display_name",
    "display_name_from_privacy",
    "initials",
]
