"""Tests for option tables and label lookups."""

from pharmacv.options import (
    ALL_SKILLS,
    COMPANY_TYPE_ANONYMOUS_LABELS,
    COMPANY_TYPES,
    GENERIC_COMPANY_LABEL,
    anonymous_company_label,
    diploma_label,
    language_label,
    level_label,
    mission_count_label,
    mission_type_icon,
    mission_type_label,
    option_label,
)


class TestOptionLabel:
    """Tests for the generic table lookup."""

    def test_known_value_returns_label(self):
        """A known key maps to its label."""
        assert level_label("native") == "Langue maternelle"
        assert diploma_label("docteur_pharmacie") == "Docteur en pharmacie"

    def test_unknown_value_returns_raw_key(self):
        """Unknown keys degrade to the key itself."""
        assert level_label("expert") == "expert"
        assert mission_type_label("roadshow") == "roadshow"

    def test_none_returns_empty_string(self):
        """None never renders as 'None'."""
        assert option_label(COMPANY_TYPES, None) == ""

    def test_mission_count_label(self):
        assert mission_count_label("50+") == "Plus de 50 missions"


class TestAnonymousCompanyLabel:
    """Tests for the structure label used instead of a company name."""

    def test_every_company_type_has_an_anonymous_label(self):
        """Each company type key has an anonymous label."""
        for value, _ in COMPANY_TYPES:
            assert value in COMPANY_TYPE_ANONYMOUS_LABELS

    def test_unknown_type_returns_generic_label(self):
        """Unknown keys fall back to the generic label, never the raw key."""
        assert anonymous_company_label("unknown_key") == GENERIC_COMPANY_LABEL

    def test_missing_type_returns_generic_label(self):
        assert anonymous_company_label(None) == GENERIC_COMPANY_LABEL
        assert anonymous_company_label("") == GENERIC_COMPANY_LABEL

    def test_known_type(self):
        assert anonymous_company_label("pharmacie_hopital") == "Établissement hospitalier"


class TestMiscLookups:
    """Tests for language and icon lookups."""

    def test_language_label_known_and_unknown(self):
        """Unknown languages are capitalized."""
        assert language_label("anglais") == "Anglais"
        assert language_label("breton") == "Breton"
        assert language_label("") == ""

    def test_mission_type_icon_fallback(self):
        assert mission_type_icon("animation") == "star"
        assert mission_type_icon("unknown") == "briefcase"

    def test_all_skills_is_flat_list(self):
        assert ALL_SKILLS
        assert all(isinstance(s, str) for s in ALL_SKILLS)
