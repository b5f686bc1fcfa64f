"""
Named CV renderers.

The package registers preview, animator-preview, card, html and docx on
import. ``pdf`` is not a renderer: it post-processes the html output.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from ..registry import Registry
from .base import CVRenderer

RENDERERS: Registry[CVRenderer] = Registry("renderer")


def register_renderer(name: str, renderer_class: Type[CVRenderer]) -> None:
    RENDERERS.add(name, renderer_class)


def get_renderer(name: str, **kwargs) -> Optional[CVRenderer]:
    """
    Instantiate the renderer registered under ``name``.

    Keyword arguments go to the renderer constructor. Unknown names give
    None so the CLI can report them alongside ``list_renderers()``.
    """
    return RENDERERS.create(name, **kwargs)


def list_renderers() -> List[Dict[str, str]]:
    """``{"name", "description"}`` entries sorted by name."""
    return RENDERERS.describe()


def unregister_renderer(name: str) -> None:
    RENDERERS.remove(name)


__all__ = [
    "RENDERERS",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "unregister_renderer",
]
