"""
CLI configuration data structures.

Defines UserConfig, the result of argument parsing that flows through the
three-phase CLI architecture.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional

from .logging_utils import VERBOSITY_NORMAL
from .shared import ViewMode


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    # Inputs
    cv: Optional[Path] = None
    profile: Optional[Path] = None

    # Rendering
    renderer: str = "preview"
    mode: ViewMode = ViewMode.ANONYMOUS
    title: Optional[str] = None
    email: Optional[str] = None
    now: Optional[date] = None
    output: Optional[Path] = None
    pdf: Optional[Path] = None

    # Verification (None: not requested, []: all registered verifiers)
    verify: Optional[List[str]] = None

    # Listing ("renderers" or "verifiers")
    list_what: Optional[str] = None

    # Execution settings
    debug: bool = False
    verbosity: int = VERBOSITY_NORMAL
    log_file: Optional[str] = None

    @property
    def has_verification(self) -> bool:
        return self.verify is not None
