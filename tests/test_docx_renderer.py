"""Tests for the Word export."""

import pytest
from docx import Document

from pharmacv.renderers.docx_renderer import DocxCVRenderer
from pharmacv.shared import RenderContext, ViewMode


def _doc_text(path) -> str:
    return "\n".join(p.text for p in Document(str(path)).paragraphs)


class TestDocxCVRenderer:
    """Tests for DocxCVRenderer."""

    def test_anonymous_export(self, tmp_path, sample_cv, sample_profile, now):
        out = tmp_path / "out" / "cv.docx"
        result = DocxCVRenderer().render(sample_cv, sample_profile, RenderContext(now=now, output_path=out))
        assert result == out
        assert out.exists()
        text = _doc_text(out)
        assert "Marie" in text
        assert "Pharmacie indépendante" in text
        assert "Pharmacie du Centre" not in text
        assert "Préparations magistrales" in text

    def test_full_export(self, tmp_path, sample_cv, sample_profile, now):
        out = tmp_path / "cv.docx"
        DocxCVRenderer().render(sample_cv, sample_profile,
                                RenderContext(mode=ViewMode.FULL, now=now, output_path=out))
        text = _doc_text(out)
        assert "Marie Durand" in text
        assert "Pharmacie du Centre" in text

    def test_control_characters_are_stripped(self, tmp_path, sample_cv, now):
        sample_cv["summary"] = "Texte\x01 avec espace"
        out = tmp_path / "cv.docx"
        DocxCVRenderer().render(sample_cv, None, RenderContext(mode="full", now=now, output_path=out))
        assert "Texte avec espace" in _doc_text(out)

    def test_requires_output_path(self, sample_cv):
        with pytest.raises(ValueError):
            DocxCVRenderer().render(sample_cv, None, RenderContext())

    def test_requires_docx_suffix(self, tmp_path, sample_cv):
        with pytest.raises(ValueError):
            DocxCVRenderer().render(sample_cv, None, RenderContext(output_path=tmp_path / "cv.pdf"))

    def test_no_cv(self, tmp_path):
        with pytest.raises(ValueError, match="No CV data"):
            DocxCVRenderer().render(None, None, RenderContext(output_path=tmp_path / "cv.docx"))
