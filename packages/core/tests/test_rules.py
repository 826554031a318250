"""Tests for constraint subjects, override kinds, RuleStore and RuleSnapshot."""

import pytest

from depignore import (
    INDEX_CLIENT,
    RUNTIME,
    IgnoreRule,
    OverrideKind,
    PackageSubject,
    PlatformKind,
    PlatformSubject,
    RuleSnapshot,
    RuleStore,
    as_subject,
    normalize_package_name,
    parse_override_kind,
    parse_subject_argument,
    platform_subject_from_keyword,
)
from depignore_common import ConfigurationError


class TestSubjects:
    """Tests for subject normalization."""

    def test_string_names_a_package(self):
        assert as_subject("left-pad") == PackageSubject("left-pad")

    def test_platform_kind_names_a_platform(self):
        assert as_subject(PlatformKind.RUNTIME) == RUNTIME
        assert as_subject(PlatformKind.INDEX_CLIENT) == INDEX_CLIENT

    def test_package_named_like_platform_does_not_collide(self):
        assert as_subject("runtime") != RUNTIME
        assert as_subject("index-client") != INDEX_CLIENT
        assert not as_subject("runtime").is_platform

    def test_package_names_are_normalized(self):
        assert normalize_package_name("Left_Pad") == "left-pad"
        assert normalize_package_name("zope.interface") == "zope-interface"
        assert PackageSubject("Left__Pad") == PackageSubject("left-pad")

    def test_subject_instances_pass_through(self):
        subject = PackageSubject("core")
        assert as_subject(subject) is subject

    @pytest.mark.parametrize("value", [None, 42, ["left-pad"], {"name": "x"}])
    def test_invalid_subjects_rejected(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            as_subject(value)
        assert repr(value) in str(exc_info.value)

    def test_empty_name_rejected(self):
        with pytest.raises(ConfigurationError, match="must not be empty"):
            as_subject("   ")

    @pytest.mark.parametrize("name", ["---", "__", " . "])
    def test_separator_only_name_rejected(self, name):
        with pytest.raises(ConfigurationError, match="must not be empty"):
            PackageSubject(name)

    def test_separator_only_name_never_reaches_store(self, store):
        with pytest.raises(ConfigurationError):
            store.record("__", "complete")
        assert len(store) == 0

    @pytest.mark.parametrize(
        "keyword,expected",
        [
            ("runtime", RUNTIME),
            ("python", RUNTIME),
            ("index-client", INDEX_CLIENT),
            ("pip", INDEX_CLIENT),
        ],
    )
    def test_platform_keywords(self, keyword, expected):
        assert platform_subject_from_keyword(keyword) == expected

    def test_unknown_platform_keyword(self):
        with pytest.raises(ConfigurationError, match="'ruby'"):
            platform_subject_from_keyword("ruby")

    def test_subject_argument(self):
        assert parse_subject_argument("platform:runtime") == RUNTIME
        assert parse_subject_argument("platform:index-client") == INDEX_CLIENT
        assert parse_subject_argument("left-pad") == PackageSubject("left-pad")

    def test_str(self):
        assert str(RUNTIME) == "platform:runtime"
        assert str(PackageSubject("Left_Pad")) == "left-pad"


class TestOverrideKind:
    """Tests for override kind validation."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("complete", OverrideKind.COMPLETE),
            ("upper", OverrideKind.UPPER_ONLY),
            ("upper_only", OverrideKind.UPPER_ONLY),
            ("Upper-Only", OverrideKind.UPPER_ONLY),
            (OverrideKind.COMPLETE, OverrideKind.COMPLETE),
        ],
    )
    def test_accepted_values(self, value, expected):
        assert parse_override_kind(value) is expected

    @pytest.mark.parametrize("value", ["lower", "", None, 1, True])
    def test_rejected_values_are_named(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_override_kind(value)
        assert repr(value) in exc_info.value.message
        assert exc_info.value.code == "CONFIGURATION_ERROR"


class TestRuleStore:
    """Tests for the mutable store."""

    def test_record_and_lookup(self, store):
        rule = store.record("left-pad", "upper")
        assert rule == IgnoreRule(PackageSubject("left-pad"), OverrideKind.UPPER_ONLY)
        assert store.lookup("left-pad") is OverrideKind.UPPER_ONLY
        assert store.lookup("Left_Pad") is OverrideKind.UPPER_ONLY

    def test_default_kind_is_complete(self, store):
        store.record("left-pad")
        assert store.lookup("left-pad") is OverrideKind.COMPLETE

    def test_lookup_missing_is_none(self, store):
        assert store.lookup("core") is None

    def test_record_overwrites(self, store):
        store.record("left-pad", "complete")
        store.record("left-pad", "upper")
        assert store.lookup("left-pad") is OverrideKind.UPPER_ONLY
        assert len(store) == 1

    def test_invalid_kind_rejected_without_recording(self, store):
        with pytest.raises(ConfigurationError, match="'sideways'"):
            store.record("left-pad", "sideways")
        assert len(store) == 0

    def test_platform_and_package_rules_coexist(self, store):
        store.record(PlatformKind.RUNTIME, "upper")
        store.record("runtime", "complete")
        assert store.lookup(PlatformKind.RUNTIME) is OverrideKind.UPPER_ONLY
        assert store.lookup("runtime") is OverrideKind.COMPLETE


class TestRuleSnapshot:
    """Tests for the frozen snapshot."""

    def test_snapshot_is_a_copy(self, store):
        store.record("left-pad")
        snapshot = store.snapshot()
        store.record("core")
        store.record("left-pad", "upper")

        assert len(snapshot) == 1
        assert snapshot.lookup(PackageSubject("left-pad")) is OverrideKind.COMPLETE
        assert PackageSubject("core") not in snapshot

    def test_snapshot_is_immutable(self, store):
        snapshot = store.snapshot()
        with pytest.raises(AttributeError):
            snapshot.generation = 0
        with pytest.raises(TypeError):
            snapshot.as_mapping()[PackageSubject("x")] = OverrideKind.COMPLETE

    def test_snapshot_has_no_record(self, store):
        assert not hasattr(store.snapshot(), "record")

    def test_completely_ignored_package_names(self, store):
        store.record("left-pad")
        store.record("Right_Pad", "complete")
        store.record("core", "upper")
        store.record(PlatformKind.RUNTIME, "complete")

        names = store.snapshot().completely_ignored_package_names
        assert names == frozenset({"left-pad", "right-pad"})

    def test_each_snapshot_derives_its_own_view(self):
        first = RuleStore()
        first.record("left-pad")
        second = RuleStore()
        second.record("core")

        assert first.snapshot().completely_ignored_package_names == {"left-pad"}
        assert second.snapshot().completely_ignored_package_names == {"core"}

    def test_generations_increase(self, store):
        assert store.snapshot().generation < store.snapshot().generation

    def test_empty_snapshot(self):
        snapshot = RuleSnapshot.empty()
        assert not snapshot
        assert len(snapshot) == 0
        assert snapshot.completely_ignored_package_names == frozenset()

    def test_equality_ignores_generation(self, store):
        store.record("left-pad")
        assert store.snapshot() == store.snapshot()

    def test_rules_listing(self, store):
        store.record("left-pad")
        store.record(PlatformKind.INDEX_CLIENT, "upper")
        assert set(store.snapshot().rules()) == {
            IgnoreRule(PackageSubject("left-pad"), OverrideKind.COMPLETE),
            IgnoreRule(PlatformSubject(PlatformKind.INDEX_CLIENT), OverrideKind.UPPER_ONLY),
        }
