"""
DOCX-based CV renderer implementation.

Writes the preview section tree of a general CV to a Word .docx file with
python-docx, so the Word export carries the same masking as the preview.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from ..shared import RenderContext, join_non_empty, xml_safe
from .base import CVRenderer
from .preview import render_preview
from .view import PreviewView, Section


class DocxCVRenderer(CVRenderer):
    """
    CV renderer for Microsoft Word .docx files.

    This implementation:
    - Renders the preview view model of the requested mode (all skill tags)
    - Strips characters that are invalid in XML before writing
    - Returns the path to the written document
    """

    def render(self, cv_data: Any, profile: Any = None, context: Optional[RenderContext] = None) -> Path:
        """
        Render CV data to a .docx file.

        Args:
            cv_data: StructuredCV or its dict form
            profile: Profile model or dict
            context: Must carry ``output_path`` ending in .docx

        Returns:
            Path to the rendered .docx file

        Raises:
            ValueError: If the output path is missing or not a .docx path,
                or if there is no CV to render
        """
        context = context or RenderContext()
        output_path = context.output_path
        if output_path is None:
            raise ValueError("An output path is required for the Word export")
        output_path = Path(output_path)
        if output_path.suffix.lower() != ".docx":
            raise ValueError(f"Output must be a .docx file: {output_path}")

        view = render_preview(cv_data, profile, context.mode, show_toggle=False,
                              now=context.resolved_now(), max_tags=None)
        if view.empty:
            raise ValueError("No CV data to render")

        doc = build_document(view)

        # Ensure output directory exists
        output_path.parent.mkdir(parents=True, exist_ok=True)
        doc.save(str(output_path))

        return output_path


def build_document(view: PreviewView):
    doc = Document()
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(10)

    header = view.header
    title_p = doc.add_paragraph()
    title_p.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = title_p.add_run(xml_safe(header.display_name))
    run.bold = True
    run.font.size = Pt(16)

    subtitle = join_non_empty([header.title, header.location, header.experience], sep=" | ")
    if subtitle:
        p = doc.add_paragraph(xml_safe(subtitle))
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
    if view.banner:
        p = doc.add_paragraph()
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER
        p.add_run(xml_safe(view.banner)).italic = True

    for section in view.sections:
        _add_section(doc, section)
    return doc


def _add_section(doc, section: Section) -> None:
    doc.add_heading(xml_safe(section.label), level=2)

    if section.name in ("skills", "software"):
        doc.add_paragraph(xml_safe(", ".join(row.primary for row in section.rows)))
        return

    for row in section.rows:
        heading = join_non_empty([row.primary, row.secondary], sep=" - ")
        if heading:
            p = doc.add_paragraph()
            p.add_run(xml_safe(heading)).bold = True
            if row.badge:
                p.add_run(f"  ({xml_safe(row.badge)})")
        meta = join_non_empty(row.meta, sep=" | ")
        if meta:
            doc.add_paragraph(xml_safe(meta))
        if row.body:
            for line in row.body.splitlines():
                if line.strip():
                    doc.add_paragraph(xml_safe(line.strip()))
        if row.tags:
            doc.add_paragraph(xml_safe(", ".join(row.tags)))
