"""Tests for the personal-information scrub."""

import pytest

from pharmacv.scrub import mask_terms, scrub_personal_info


class TestScrubPersonalInfo:
    """Tests for the ordered regex rule set."""

    def test_phone_scenario(self):
        """A French mobile number is masked in place."""
        text = "Contactez-moi au 06 12 34 56 78 pour plus d'infos"
        assert scrub_personal_info(text) == "Contactez-moi au [téléphone masqué] pour plus d'infos"

    def test_international_phone(self):
        assert scrub_personal_info("Tel +33 6 12 34 56 78") == "Tel [téléphone masqué]"

    def test_email(self):
        assert scrub_personal_info("Écrire à jean.dupont@pharma.fr svp") == "Écrire à [email masqué] svp"

    def test_named_pharmacy(self):
        assert scrub_personal_info("Adjoint à la Pharmacie Dupont") == "Adjoint à la Pharmacie [confidentiel]"

    def test_postal_code_and_address(self):
        result = scrub_personal_info("Situé au 12 rue des Lilas 75011")
        assert "75011" not in result
        assert "rue des Lilas" not in result

    def test_empty_input(self):
        assert scrub_personal_info(None) == ""
        assert scrub_personal_info("") == ""

    def test_lowercase_pharmacy_name_is_not_caught(self):
        """The rule set is best-effort: uncapitalized names pass through."""
        assert "pharmacie dupont" in scrub_personal_info("stage en pharmacie dupont")

    @pytest.mark.parametrize(
        "text",
        [
            "Contactez-moi au 06 12 34 56 78 pour plus d'infos",
            "Mail: a.b@c.fr, 0612345678, Pharmacie Martin Lyon",
            "Leclerc Pharma et 3 avenue Foch 69006 Lyon",
            "Texte   sans   données   personnelles",
        ],
    )
    def test_scrub_is_idempotent(self, text):
        """Scrubbing twice equals scrubbing once."""
        once = scrub_personal_info(text)
        assert scrub_personal_info(once) == once

    def test_no_email_survives(self):
        once = scrub_personal_info("a@b.fr c@d.com")
        assert "@" not in once


class TestMaskTerms:
    """Tests for masking known organization names."""

    def test_exact_and_case_insensitive(self):
        text = "Chez Pharmacie du Centre puis PHARMACIE DU CENTRE"
        assert mask_terms(text, ["Pharmacie du Centre"]) == "Chez [confidentiel] puis [confidentiel]"

    def test_longest_term_first(self):
        assert mask_terms("Groupe Alpha Santé", ["Alpha", "Groupe Alpha Santé"]) == "[confidentiel]"

    def test_short_terms_ignored(self):
        assert mask_terms("A B C", ["A"]) == "A B C"

    def test_word_boundaries(self):
        assert mask_terms("Sanofix", ["sanofi"]) == "Sanofix"


class TestDigitClasses:
    """Number rules only match ASCII digits."""

    def test_ascii_postal_code_removed(self):
        assert scrub_personal_info("Secteur 75011 Paris") == "Secteur Paris"

    def test_non_ascii_digits_untouched(self):
        text = "Secteur ٧٥٠١١ Paris"
        assert scrub_personal_info(text) == text

    def test_non_ascii_phone_untouched(self):
        text = "Tél ٠٦ ١١ ٢٢ ٣٣ ٤٤"
        assert scrub_personal_info(text) == text

    def test_accented_email_masked_whole(self):
        assert scrub_personal_info("Contact josé@exemple.fr") == "Contact [email masqué]"
