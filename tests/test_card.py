"""Tests for the compact CV card."""

from pharmacv.renderers.card import CardCVRenderer, render_card
from pharmacv.shared import RenderContext, ViewMode


class TestRenderCard:
    """Tests for render_card()."""

    def test_missing_cv(self):
        assert render_card(None) is None

    def test_anonymous_card(self, sample_cv, sample_profile, now):
        card = render_card(sample_cv, sample_profile, anonymous=True, now=now)
        assert card.display_name == "Marie"
        assert card.initials == "MA"
        assert card.title == "Pharmacien adjoint"
        assert card.location == "Auvergne-Rhône-Alpes"
        assert card.experience == "5+ ans"
        assert card.main_skills == ["Conseil patient", "Gestion des stocks", "Vaccination"]
        assert card.completeness_percent == 100

    def test_full_card(self, sample_cv, sample_profile, now):
        card = render_card(sample_cv, sample_profile, anonymous=False, now=now)
        assert card.display_name == "Marie Durand"
        assert card.initials == "MD"
        assert card.location == "Lyon, Auvergne-Rhône-Alpes"

    def test_title_falls_back_to_first_job(self, sample_cv, now):
        sample_cv["profession_title"] = ""
        sample_cv["experiences"][0]["job_title"] = "Pharmacien titulaire"
        assert render_card(sample_cv, None, now=now).title == "Pharmacien titulaire"

    def test_renderer(self, sample_cv, now):
        card = CardCVRenderer().render(sample_cv, None, RenderContext(mode=ViewMode.FULL, now=now))
        assert card.to_dict()["display_name"] == "Utilisateur"
