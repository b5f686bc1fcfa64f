"""
Name -> class tables shared by the renderer and verifier registries.

Entries are classes, instantiated on lookup so every caller gets a fresh
object configured with its own keyword arguments.
"""

from __future__ import annotations

from typing import Dict, Generic, List, Optional, Type, TypeVar

T = TypeVar("T")

NO_DESCRIPTION = "No description available"


def summary_line(cls: type) -> str:
    """First line of the class docstring."""
    doc = (cls.__doc__ or "").strip()
    return doc.splitlines()[0] if doc else NO_DESCRIPTION


class Registry(Generic[T]):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._classes: Dict[str, Type[T]] = {}

    def add(self, name: str, cls: Type[T]) -> None:
        # Re-registering a name replaces the previous class
        self._classes[name] = cls

    def remove(self, name: str) -> None:
        self._classes.pop(name, None)

    def create(self, name: str, **kwargs) -> Optional[T]:
        cls = self._classes.get(name)
        return cls(**kwargs) if cls is not None else None

    def describe(self) -> List[Dict[str, str]]:
        return [
            {"name": name, "description": summary_line(self._classes[name])}
            for name in sorted(self._classes)
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __repr__(self) -> str:
        return f"Registry({self.kind!r}, {sorted(self._classes)})"
