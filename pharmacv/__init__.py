# pharmacv/__init__.py

from .anonymizer import anonymize, completeness, extract_main_skills, full_view, project
from .identity import display_name, initials
from .models import load_cv
from .pdf_export import export_cv_to_pdf
from .renderers import generate_cv_html, render_animator_preview, render_card, render_preview
from .scrub import scrub_personal_info
from .shared import ViewMode

__all__ = [
    "anonymize",
    "full_view",
    "project",
    "completeness",
    "extract_main_skills",
    "display_name",
    "initials",
    "load_cv",
    "scrub_personal_info",
    "render_preview",
    "render_animator_preview",
    "render_card",
    "generate_cv_html",
    "export_cv_to_pdf",
    "ViewMode",
]
