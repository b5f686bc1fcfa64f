"""
CLI Phase 2: Prepare execution environment.

Validates inputs and prepares output directories.
No actual execution - just setup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .cli_config import UserConfig
from .logging_utils import LOG
from .renderers import list_renderers
from .verifiers import list_verifiers


def _require_file(path: Optional[Path], label: str) -> None:
    if path is None:
        return
    if not path.is_file():
        LOG.error("%s file not found: %s", label, path)
        raise FileNotFoundError(f"{label} file not found: {path}")


def _ensure_parent(path: Optional[Path]) -> None:
    if path is not None:
        path.expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def prepare_execution_environment(config: UserConfig) -> UserConfig:
    """
    Phase 2: Validate inputs and prepare execution environment.

    - Checks that the CV and profile files exist
    - Checks renderer and verifier names against the registries
    - Creates output directories
    - No execution yet

    Returns the same config (for chaining).
    """
    if config.list_what:
        return config

    if config.cv is None:
        raise ValueError("--cv is required unless --list is given")
    _require_file(config.cv, "CV")
    _require_file(config.profile, "Profile")

    renderer_names = {r["name"] for r in list_renderers()}
    if config.renderer not in renderer_names:
        LOG.error("Use --list renderers to see available renderers")
        raise ValueError(f"Unknown renderer: {config.renderer}")

    if config.verify:
        verifier_names = {v["name"] for v in list_verifiers()}
        unknown = [name for name in config.verify if name not in verifier_names]
        if unknown:
            LOG.error("Use --list verifiers to see available verifiers")
            raise ValueError(f"Unknown verifier(s): {', '.join(unknown)}")

    if config.renderer == "docx":
        if config.output is None or config.output.suffix.lower() != ".docx":
            raise ValueError("The docx renderer needs --output ending in .docx")

    if config.pdf is not None and config.pdf.suffix.lower() != ".pdf":
        raise ValueError(f"PDF output must end in .pdf: {config.pdf}")

    _ensure_parent(config.output)
    _ensure_parent(config.pdf)
    return config
