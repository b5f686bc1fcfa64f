"""
CV rendering interfaces and implementations.

This module provides the interactive previews, the card snippet and the
document exports, each selectable by name through the renderer registry.
"""

from .base import CVRenderer
from .animator_preview import AnimatorPreviewRenderer, render_animator_preview
from .card import CardCVRenderer, CardView, render_card
from .docx_renderer import DocxCVRenderer
from .html_renderer import HtmlCVRenderer, generate_cv_html
from .preview import CVPreview, PreviewCVRenderer, render_preview
from .renderer_registry import get_renderer, list_renderers, register_renderer, unregister_renderer
from .view import Header, PreviewView, Row, Section

# Register built-in renderers
register_renderer("preview", PreviewCVRenderer)
register_renderer("animator-preview", AnimatorPreviewRenderer)
register_renderer("card", CardCVRenderer)
register_renderer("html", HtmlCVRenderer)
register_renderer("docx", DocxCVRenderer)

__all__ = [
    "CVRenderer",
    "AnimatorPreviewRenderer",
    "CardCVRenderer",
    "DocxCVRenderer",
    "HtmlCVRenderer",
    "PreviewCVRenderer",
    "CVPreview",
    "CardView",
    "Header",
    "PreviewView",
    "Row",
    "Section",
    "generate_cv_html",
    "render_animator_preview",
    "render_card",
    "render_preview",
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "unregister_renderer",
]
