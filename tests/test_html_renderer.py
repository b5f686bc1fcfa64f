"""Tests for the HTML document export."""

from pharmacv.renderers.html_renderer import (
    ANONYMOUS_BADGE,
    ANONYMOUS_NOTICE,
    FULL_BADGE,
    HtmlCVRenderer,
    generate_cv_html,
)
from pharmacv.shared import RenderContext, ViewMode
from pharmacv.verifiers.conformance_verifier import html_text


class TestGenerateCvHtml:
    """Tests for generate_cv_html()."""

    def test_none_gives_empty_string(self):
        assert generate_cv_html(None) == ""

    def test_anonymous_document(self, sample_cv, sample_profile, now):
        html = generate_cv_html(sample_cv, sample_profile, anonymous=True, email="pro@example.com", now=now)
        text = html_text(html)
        assert ANONYMOUS_NOTICE in text
        assert ANONYMOUS_BADGE in text
        assert "Pharmacie indépendante" in text
        assert "Formation pharmaceutique" in text
        for raw in ("Pharmacie du Centre", "Université Lyon 1", "Durand", "pro@example.com", "06 99 88 77 66"):
            assert raw not in text
        assert "<img" not in html

    def test_full_document(self, sample_cv, sample_profile, now):
        html = generate_cv_html(sample_cv, sample_profile, anonymous=False, email="pro@example.com", now=now)
        text = html_text(html)
        assert FULL_BADGE in text
        assert "Marie Durand" in text
        assert "Pharmacie du Centre" in text
        assert "pro@example.com" in text
        assert "06 99 88 77 66" in text
        assert sample_profile["photo_url"] in html
        assert ANONYMOUS_NOTICE not in text

    def test_cv_contacts_are_not_exported(self, sample_cv, now):
        """Only caller-supplied contacts appear in the document."""
        text = html_text(generate_cv_html(sample_cv, None, anonymous=False, now=now))
        assert "marie@example.com" not in text
        assert "06 11 22 33 44" not in text

    def test_all_tags_exported(self, sample_cv, now):
        text = html_text(generate_cv_html(sample_cv, None, anonymous=True, now=now))
        assert "Préparations magistrales" in text

    def test_title_and_footer(self, sample_cv, sample_profile, now):
        html = generate_cv_html(sample_cv, sample_profile, now=now)
        assert "<title>CV - Marie Durand</title>" in html
        assert "CV généré via Pharma Link • 01/03/2024" in html_text(html)
        custom = generate_cv_html(sample_cv, sample_profile, title="Mon CV", now=now)
        assert "<title>Mon CV</title>" in custom

    def test_markup_is_escaped(self, sample_cv, now):
        sample_cv["summary"] = "<script>alert(1)</script>"
        html = generate_cv_html(sample_cv, None, anonymous=False, now=now)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_renderer(self, sample_cv, now):
        context = RenderContext(mode=ViewMode.FULL, now=now, title="Export")
        html = HtmlCVRenderer().render(sample_cv, None, context)
        assert "<title>Export</title>" in html
