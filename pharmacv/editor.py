"""
Builder/editor helpers.

Each helper returns a new CV value; the input CV is never modified. List
entries are addressed by their id, or by position for lists whose entries
carry no id (languages).
"""

from __future__ import annotations

from dataclasses import fields, replace
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type, Union

from .logging_utils import LOG
from .models import (
    AnimatorCV,
    AnyCV,
    BrandCertification,
    BrandExperience,
    Certification,
    Experience,
    Formation,
    KeyMission,
    LanguageSkill,
)

ItemRef = Union[str, int]

LIST_ITEM_TYPES: Dict[str, Type] = {
    "experiences": Experience,
    "formations": Formation,
    "certifications": Certification,
    "languages": LanguageSkill,
    "brands_experience": BrandExperience,
    "key_missions": KeyMission,
    "brand_certifications": BrandCertification,
}


def _list_type(cv: AnyCV, list_name: str) -> Type:
    names = {f.name for f in fields(cv)}
    if list_name not in names or list_name not in LIST_ITEM_TYPES:
        raise ValueError(f"{type(cv).__name__} has no editable list {list_name!r}")
    return LIST_ITEM_TYPES[list_name]


def _coerce_item(item_type: Type, item: Any) -> Any:
    if isinstance(item, item_type):
        return item
    return item_type.from_dict(item)


def _index_of(items: List[Any], ref: ItemRef) -> int:
    if isinstance(ref, int):
        if 0 <= ref < len(items):
            return ref
    else:
        for idx, item in enumerate(items):
            if getattr(item, "id", None) == ref:
                return idx
    raise KeyError(ref)


def add_item(cv: AnyCV, list_name: str, item: Any = None, id_gen: Optional[Callable[[], str]] = None) -> AnyCV:
    """
    Append ``item`` (model or dict; empty entry when None) to ``list_name``.

    Entries with an ``id`` field get a fresh id from ``id_gen`` when they
    have none.
    """
    item_type = _list_type(cv, list_name)
    entry = _coerce_item(item_type, item or {})
    if "id" in {f.name for f in fields(entry)} and not entry.id:
        if id_gen is None:
            raise ValueError(f"an id generator is required to add to {list_name}")
        entry = replace(entry, id=id_gen())
    return replace(cv, **{list_name: [*getattr(cv, list_name), entry]})


def update_item(cv: AnyCV, list_name: str, ref: ItemRef, changes: Mapping[str, Any]) -> AnyCV:
    """Replace fields of one entry. Raises KeyError for an unknown entry."""
    _list_type(cv, list_name)
    items = list(getattr(cv, list_name))
    idx = _index_of(items, ref)
    changes = {k: v for k, v in changes.items() if k != "id"}
    items[idx] = replace(items[idx], **changes)
    return replace(cv, **{list_name: items})


def remove_item(cv: AnyCV, list_name: str, ref: ItemRef) -> AnyCV:
    _list_type(cv, list_name)
    items = list(getattr(cv, list_name))
    del items[_index_of(items, ref)]
    return replace(cv, **{list_name: items})

# ------------------------- Mission import -------------------------

def _parse_day(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    except ValueError:
        LOG.debug("Unparseable mission date: %r", value)
        return None


def mission_month_year(value: Any) -> str:
    """``MM/YYYY`` of a mission date, empty when unparseable."""
    day = _parse_day(value)
    return day.strftime("%m/%Y") if day else ""


def mission_duration_days(start: Any, end: Any) -> Optional[int]:
    """Whole days between start and end, at least 1; None when a date is missing."""
    start_day, end_day = _parse_day(start), _parse_day(end)
    if start_day is None or end_day is None:
        return None
    return max(1, (end_day - start_day).days)


def _client_brand(client: Mapping[str, Any]) -> str:
    for key in ("brand_name", "company_name"):
        value = client.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    parts = [client.get("first_name"), client.get("last_name")]
    return " ".join(p.strip() for p in parts if isinstance(p, str) and p.strip())


def mission_to_key_mission(mission: Mapping[str, Any], id_gen: Callable[[], str]) -> KeyMission:
    """Turn a completed platform mission into a key mission of an animator CV."""
    client = mission.get("client_profile") or {}
    if not isinstance(client, Mapping):
        client = {}
    title = mission.get("title") or ""
    description = mission.get("description") or ""
    return KeyMission(
        id=id_gen(),
        source_mission_id=str(mission["id"]) if mission.get("id") is not None else None,
        brand=_client_brand(client),
        mission_type=mission.get("mission_type") or None,
        city=mission.get("city") or "",
        region=mission.get("region") or "",
        date=mission_month_year(mission.get("start_date")),
        duration_days=mission_duration_days(mission.get("start_date"), mission.get("end_date")),
        description=f"{title}\n{description}" if description else title,
    )


def importable_missions(cv: AnimatorCV, missions: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Missions not already imported as key missions."""
    imported = {m.source_mission_id for m in cv.key_missions if m.source_mission_id}
    return [m for m in missions if str(m.get("id")) not in imported]


def import_missions(cv: AnimatorCV, missions: Iterable[Mapping[str, Any]],
                    id_gen: Callable[[], str]) -> AnimatorCV:
    new_entries = [mission_to_key_mission(m, id_gen) for m in importable_missions(cv, missions)]
    return replace(cv, key_missions=[*cv.key_missions, *new_entries])


def set_visibility(cv: AnimatorCV, show_photo: Optional[bool] = None, show_rating: Optional[bool] = None,
                   show_contact: Optional[bool] = None) -> AnimatorCV:
    changes = {
        name: value
        for name, value in (("show_photo", show_photo), ("show_rating", show_rating), ("show_contact", show_contact))
        if value is not None
    }
    return replace(cv, **changes)


__all__ = [
    "add_item",
    "update_item",
    "remove_item",
    "mission_to_key_mission",
    "importable_missions",
    "import_missions",
    "set_visibility",
]
