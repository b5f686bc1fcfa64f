"""
CLI Phase 3: Execute.

Loads the input JSON, runs the requested verifiers, renders with the selected
renderer and optionally exports the PDF. All output paths come from the
prepared UserConfig.
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .cli_config import UserConfig
from .logging_utils import LOG, fmt_issues
from .models import RatingData
from .pdf_export import export_cv_to_pdf
from .renderers import get_renderer, list_renderers
from .shared import RenderContext
from .verifiers import get_verifier, list_verifiers


def _load_json(path: Optional[Path]) -> Any:
    if path is None:
        return None
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _to_jsonable(result: Any) -> Any:
    if hasattr(result, "to_dict"):
        return result.to_dict()
    if is_dataclass(result):
        return asdict(result)
    return result


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    output.write_text(text, encoding="utf-8")
    LOG.info("Wrote %s", output)


def _list(config: UserConfig) -> int:
    entries = list_renderers() if config.list_what == "renderers" else list_verifiers()
    for entry in entries:
        print(f"{entry['name']:<20} {entry['description']}")
    return 0


def _run_verifiers(config: UserConfig, cv_data: Any, profile: Any) -> bool:
    """Run the requested verifiers; True when none reported errors."""
    names = config.verify or [v["name"] for v in list_verifiers()]
    ok = True
    for name in names:
        verifier = get_verifier(name)
        result = verifier.verify(cv_data, profile=profile, mode=config.mode, now=config.now)
        icon = "✅" if result.ok and not result.warnings else ("⚠️ " if result.ok else "❌")
        LOG.info("%s %s | %s", icon, name, fmt_issues(result.errors, result.warnings))
        ok = ok and result.ok
    return ok


def _renderer_name(config: UserConfig, cv_data: Any) -> str:
    if config.renderer == "preview" and isinstance(cv_data, dict) and cv_data.get("cv_type") == "animator":
        LOG.info("Animator CV detected, using the animator-preview renderer")
        return "animator-preview"
    return config.renderer


def execute(config: UserConfig) -> int:
    """
    Phase 3: Execute based on user configuration.

    Returns exit code (0 = success, 1 = failure or verifier errors).
    """
    if config.list_what:
        return _list(config)

    cv_data = _load_json(config.cv)
    profile_data: Dict[str, Any] = _load_json(config.profile) or {}
    rating = profile_data.get("rating") if isinstance(profile_data, dict) else None

    exit_code = 0
    if config.has_verification and not _run_verifiers(config, cv_data, profile_data):
        exit_code = 1

    name = _renderer_name(config, cv_data)
    renderer = get_renderer(name)
    context = RenderContext(
        mode=config.mode,
        now=config.now,
        title=config.title,
        email=config.email,
        rating=RatingData.from_dict(rating) if rating else None,
        show_toggle=False,
        output_path=config.output,
    )
    result = renderer.render(cv_data, profile_data, context)

    if isinstance(result, Path):
        LOG.info("Wrote %s", result)
    elif isinstance(result, str):
        _emit(result, config.output)
    else:
        _emit(json.dumps(_to_jsonable(result), ensure_ascii=False, indent=2), config.output)

    if config.pdf is not None:
        export = export_cv_to_pdf(
            cv_data,
            profile_data,
            config.pdf,
            anonymous=config.mode.anonymous,
            title=config.title,
            email=config.email,
            now=config.now,
        )
        if not export.success:
            exit_code = 1

    return exit_code
