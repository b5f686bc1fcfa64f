"""
Compact CV card used in candidate lists.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from ..anonymizer import completeness, extract_main_skills, project
from ..dates import total_experience
from ..models import as_profile, as_structured_cv
from ..shared import RenderContext, ViewMode
from .base import CVRenderer

MAX_CARD_SKILLS = 3


@dataclass(frozen=True)
class CardView:
    display_name: str
    initials: str
    title: str
    location: str
    experience: str
    main_skills: List[str] = field(default_factory=list)
    completeness_percent: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def render_card(cv: Any, profile: Any = None, anonymous: bool = True,
                now: Optional[date] = None) -> Optional[CardView]:
    structured = as_structured_cv(cv)
    if structured is None:
        return None
    now = now or date.today()
    view = project(structured, as_profile(profile), ViewMode.coerce(anonymous), now)
    return CardView(
        display_name=view.display_name,
        initials=view.initials,
        title=view.profession_title,
        location=view.location,
        experience=total_experience(structured.experiences, now).formatted,
        main_skills=extract_main_skills(structured, MAX_CARD_SKILLS),
        completeness_percent=completeness(structured).percent,
    )


class CardCVRenderer(CVRenderer):
    """Compact card: name, title, location, experience and main skills."""

    def render(self, cv_data: Any, profile: Any = None, context: Optional[RenderContext] = None) -> Optional[CardView]:
        context = context or RenderContext()
        return render_card(cv_data, profile, ViewMode.coerce(context.mode).anonymous, context.resolved_now())
