"""Tests for the interactive preview of a general CV."""

from pharmacv.renderers.preview import CVPreview, PreviewCVRenderer, render_preview
from pharmacv.renderers.view import ANONYMOUS_BANNER, EMPTY_MESSAGE, PreviewView
from pharmacv.shared import RenderContext, ViewMode


def _texts(view: PreviewView) -> str:
    return " ".join(view.display_strings(include_caller_supplied=True))


class TestRenderPreview:
    """Tests for render_preview()."""

    def test_missing_cv_gives_empty_view(self):
        view = render_preview(None)
        assert view.empty
        assert view.empty_message == EMPTY_MESSAGE
        assert view.sections == []
        assert view.header is None

    def test_anonymous_header(self, sample_cv, sample_profile, now):
        view = render_preview(sample_cv, sample_profile, ViewMode.ANONYMOUS, now=now)
        assert view.banner == ANONYMOUS_BANNER
        assert view.header.display_name == "Marie"
        assert view.header.title == "Pharmacien adjoint"
        assert view.header.location == "Auvergne-Rhône-Alpes"
        assert view.header.experience == "5+ ans d'expérience"
        assert view.header.completeness_percent == 100
        assert view.header.photo_url == ""
        assert view.header.contacts == []

    def test_section_order(self, sample_cv, now):
        view = render_preview(sample_cv, None, "anonymous", now=now)
        assert view.section_names == [
            "summary", "experiences", "formations", "skills", "software", "certifications", "languages",
        ]

    def test_empty_sections_are_omitted(self, sample_cv, now):
        sample_cv["software"] = []
        sample_cv["certifications"] = []
        view = render_preview(sample_cv, None, now=now)
        assert "software" not in view.section_names
        assert "certifications" not in view.section_names

    def test_experience_row(self, sample_cv, now):
        row = render_preview(sample_cv, None, now=now).section("experiences").rows[0]
        assert row.primary == "Pharmacien adjoint"
        assert row.secondary == "Pharmacie indépendante"
        assert row.meta == ["Auvergne-Rhône-Alpes", "mars 2020 - Présent", "4 ans"]
        assert row.badge == "Actuel"

    def test_tags_are_capped(self, sample_cv, now):
        row = render_preview(sample_cv, None, now=now).section("experiences").rows[0]
        assert len(row.tags) == 4
        assert row.more_tags == 1

    def test_uncapped_tags(self, sample_cv, now):
        row = render_preview(sample_cv, None, now=now, max_tags=None).section("experiences").rows[0]
        assert len(row.tags) == 5
        assert row.more_tags == 0

    def test_missing_job_title_placeholder(self, sample_cv, now):
        sample_cv["experiences"][1]["job_title"] = ""
        row = render_preview(sample_cv, None, now=now).section("experiences").rows[1]
        assert row.primary == "Poste non renseigné"

    def test_languages_are_labelled(self, sample_cv, now):
        rows = render_preview(sample_cv, None, now=now).section("languages").rows
        assert [(r.primary, r.secondary) for r in rows] == [
            ("Français", "Langue maternelle"),
            ("Anglais", "Courant / Bilingue"),
        ]

    def test_anonymous_preview_hides_identifiers(self, sample_cv, sample_profile, now):
        text = _texts(render_preview(sample_cv, sample_profile, now=now))
        for raw in ("Pharmacie du Centre", "Hôpital Édouard Herriot", "Université Lyon 1", "Durand",
                    "marie@example.com"):
            assert raw not in text

    def test_full_preview_shows_contacts_and_photo(self, sample_cv, sample_profile, now):
        view = render_preview(sample_cv, sample_profile, ViewMode.FULL, now=now)
        assert view.banner == ""
        assert view.header.display_name == "Marie Durand"
        assert view.header.photo_url == sample_profile["photo_url"]
        assert view.header.contacts == ["marie@example.com", "06 11 22 33 44"]
        contact = view.section("contact")
        assert [r.primary for r in contact.rows] == ["marie@example.com", "06 11 22 33 44"]
        assert view.section("experiences").rows[0].secondary == "Pharmacie du Centre"

    def test_completeness_does_not_depend_on_mode(self, sample_cv, now):
        anonymous = render_preview(sample_cv, None, "anonymous", now=now)
        full = render_preview(sample_cv, None, "full", now=now)
        assert anonymous.header.completeness_percent == full.header.completeness_percent

    def test_to_dict(self, sample_cv, now):
        data = render_preview(sample_cv, None, now=now).to_dict()
        assert data["mode"] == "anonymous"
        assert data["sections"][0]["name"] == "summary"


class TestCVPreview:
    """Tests for the local anonymous/full toggle."""

    def test_toggle_reprojects(self, sample_cv, sample_profile, now):
        preview = CVPreview(sample_cv, sample_profile, now=now)
        assert preview.view().header.display_name == "Marie"
        assert preview.set_mode("full").header.display_name == "Marie Durand"
        assert preview.set_mode(ViewMode.ANONYMOUS).header.display_name == "Marie"

    def test_disabled_toggle_keeps_mode(self, sample_cv, sample_profile, now):
        preview = CVPreview(sample_cv, sample_profile, mode="anonymous", show_toggle=False, now=now)
        view = preview.set_mode("full")
        assert view.mode is ViewMode.ANONYMOUS
        assert view.show_toggle is False


class TestPreviewRenderer:
    """Tests for the registry-facing renderer."""

    def test_render_uses_context(self, sample_cv, now):
        view = PreviewCVRenderer().render(sample_cv, None, RenderContext(mode=ViewMode.FULL, now=now))
        assert view.mode is ViewMode.FULL
        assert view.section("experiences").rows[0].secondary == "Pharmacie du Centre"
