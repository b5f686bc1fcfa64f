"""Tests for the field-visibility policies."""

from pharmacv.models import AnimatorCV
from pharmacv.shared import ViewMode
from pharmacv.visibility import (
    CONTACT,
    FULL_NAME,
    ORGANIZATIONS,
    PHOTO,
    RATING,
    AnimatorVisibility,
    ModeVisibility,
)


class TestModeVisibility:
    """Tests for the anonymous/full switch."""

    def test_anonymous_hides_identifying_fields(self):
        policy = ModeVisibility(ViewMode.ANONYMOUS)
        assert not any(policy.is_visible(f) for f in (PHOTO, CONTACT, FULL_NAME, ORGANIZATIONS))

    def test_full_shows_everything(self):
        policy = ModeVisibility("full")
        assert all(policy.is_visible(f) for f in (PHOTO, CONTACT, FULL_NAME, ORGANIZATIONS))

    def test_rating_is_always_visible(self):
        assert ModeVisibility().is_visible(RATING)

    def test_unknown_field_hidden(self):
        assert not ModeVisibility("full").is_visible("shoe_size")


class TestAnimatorVisibility:
    """Tests for the per-section animator flags."""

    def test_defaults(self):
        policy = AnimatorVisibility()
        assert not policy.is_visible(PHOTO)
        assert policy.is_visible(RATING)
        assert not policy.is_visible(CONTACT)
        assert policy.is_visible(FULL_NAME)

    def test_from_cv(self, animator_cv):
        policy = AnimatorVisibility.from_cv(AnimatorCV.from_dict({**animator_cv, "show_contact": True}))
        assert policy.is_visible(CONTACT)
        assert not policy.is_visible(PHOTO)

    def test_unknown_field_hidden(self):
        assert not AnimatorVisibility(True, True, True).is_visible("shoe_size")
