"""Tests for the badge type registry."""
import pytest
from pydantic import ValidationError

from pkgbadges.domain.badges.errors import MissingBadgeAttributes, UnknownBadgeType
from pkgbadges.domain.badges.types import (
    BADGE_TYPES,
    Appveyor,
    GitLab,
    IsItMaintainedOpenIssues,
    TravisCi,
    badge_from_row,
    build_badge,
    known_badge_types,
    optional_attributes,
    required_attributes,
)


class TestRegistryMetadata:
    """Required/optional attribute sets per type."""

    def test_known_types_include_core_ci_services(self):
        known = known_badge_types()
        assert {"appveyor", "travis-ci", "gitlab"} <= set(known)
        assert known == sorted(known)

    def test_every_type_requires_repository(self):
        for badge_type in BADGE_TYPES:
            assert "repository" in required_attributes(badge_type)

    def test_appveyor_attributes(self):
        assert required_attributes("appveyor") == {"repository"}
        assert optional_attributes("appveyor") == {"branch", "service"}

    def test_travis_ci_attributes(self):
        assert required_attributes("travis-ci") == {"repository"}
        assert optional_attributes("travis-ci") == {"branch"}

    def test_is_it_maintained_has_no_branch(self):
        assert optional_attributes("is-it-maintained-open-issues") == frozenset()

    def test_unknown_type_metadata_raises(self):
        with pytest.raises(UnknownBadgeType):
            required_attributes("not-a-badge")
        with pytest.raises(UnknownBadgeType):
            optional_attributes("not-a-badge")


class TestBuildBadge:
    """Constructing typed badges from raw attribute maps."""

    def test_build_appveyor(self, appveyor_attributes):
        badge = build_badge("appveyor", appveyor_attributes)
        assert badge == Appveyor(service="github", repository="rust-lang/cargo")
        assert badge.branch is None

    def test_build_travis_ci(self, travis_ci_attributes):
        badge = build_badge("travis-ci", travis_ci_attributes)
        assert badge == TravisCi(branch="beta", repository="rust-lang/rust")

    def test_extra_keys_are_ignored(self, appveyor_attributes):
        extended = dict(appveyor_attributes)
        extended["extra"] = "info"
        badge = build_badge("appveyor", extended)
        assert badge == build_badge("appveyor", appveyor_attributes)
        assert "extra" not in badge.attributes()

    def test_missing_required_attribute(self, gitlab_attributes):
        del gitlab_attributes["repository"]
        with pytest.raises(MissingBadgeAttributes) as exc_info:
            build_badge("gitlab", gitlab_attributes)
        assert exc_info.value.badge_type == "gitlab"
        assert exc_info.value.missing == ["repository"]

    def test_none_value_counts_as_missing(self):
        with pytest.raises(MissingBadgeAttributes):
            build_badge("travis-ci", {"repository": None})

    def test_non_string_value_is_rejected(self):
        with pytest.raises(MissingBadgeAttributes) as exc_info:
            build_badge("travis-ci", {"repository": 42})
        assert exc_info.value.missing == ["repository"]

    def test_extra_key_does_not_satisfy_required(self):
        with pytest.raises(MissingBadgeAttributes):
            build_badge("travis-ci", {"repo": "rust-lang/rust"})

    def test_unknown_type(self):
        with pytest.raises(UnknownBadgeType) as exc_info:
            build_badge("not-a-badge", {"not-a-badge-attribute": "not-a-badge-value"})
        assert exc_info.value.badge_type == "not-a-badge"


class TestBadgeValues:
    """Badge values are immutable and serialise without the discriminator."""

    def test_badges_are_frozen(self):
        badge = GitLab(repository="rust-lang/rust")
        with pytest.raises(ValidationError):
            badge.branch = "beta"

    def test_missing_repository_is_unrepresentable(self):
        with pytest.raises(ValidationError):
            TravisCi(branch="beta")

    def test_to_encodable(self):
        badge = Appveyor(service="github", repository="rust-lang/cargo")
        assert badge.to_encodable() == {
            "badge_type": "appveyor",
            "attributes": {"repository": "rust-lang/cargo", "branch": None, "service": "github"},
        }

    def test_badge_from_row(self):
        badge = badge_from_row("is-it-maintained-open-issues", {"repository": "serde-rs/serde"})
        assert badge == IsItMaintainedOpenIssues(repository="serde-rs/serde")

    def test_badge_from_row_unknown_type(self):
        with pytest.raises(UnknownBadgeType):
            badge_from_row("retired-ci", {"repository": "a/b"})
