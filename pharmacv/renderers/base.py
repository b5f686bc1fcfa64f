"""
Base interface for CV renderers.

Defines the contract for pluggable CV rendering implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..shared import RenderContext


class CVRenderer(ABC):
    """
    Abstract base class for CV renderers.

    Implementations turn a structured CV and a profile into a view model,
    a markup string or a document file.
    """

    @abstractmethod
    def render(self, cv_data: Any, profile: Any = None, context: Optional[RenderContext] = None) -> Any:
        """
        Render CV data.

        Args:
            cv_data: Structured CV, either a model instance or the
                deserialized JSON dict. ``None`` yields the renderer's empty result.
            profile: Profile model or dict (first_name, last_name, nickname,
                current_city, current_region, photo_url, phone)
            context: Mode, clock and caller-provided options

        Returns:
            Renderer-specific output (view model, markup string or file path)
        """
        ...
