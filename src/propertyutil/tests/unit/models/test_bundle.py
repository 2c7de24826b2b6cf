# ABOUTME: Unit tests for the ResolvedBundle model and BundleSource enum
# ABOUTME: Tests immutability, lookups and mapping behaviour

import dataclasses

import pytest

from propertyutil.models import BundleSource, ResolvedBundle


class TestResolvedBundle:
    """Test cases for ResolvedBundle."""

    @pytest.mark.unit
    def test_lookup(self):
        bundle = ResolvedBundle(name="app", source=BundleSource.WORKING_DIRECTORY, entries={"k": "v"})

        assert bundle.get("k") == "v"
        assert bundle.get("missing") is None
        assert "k" in bundle
        assert "missing" not in bundle
        assert len(bundle) == 1
        assert list(bundle) == ["k"]
        assert list(bundle.keys()) == ["k"]

    @pytest.mark.unit
    def test_entries_are_copied(self):
        entries = {"k": "v"}
        bundle = ResolvedBundle(name="app", source=BundleSource.PACKAGED, entries=entries)

        entries["k"] = "changed"
        entries["new"] = "x"

        assert bundle.get("k") == "v"
        assert "new" not in bundle

    @pytest.mark.unit
    def test_entries_are_read_only(self):
        bundle = ResolvedBundle(name="app", source=BundleSource.USER_HOME, entries={"k": "v"})

        with pytest.raises(TypeError):
            bundle.entries["k"] = "changed"  # type: ignore[index]

    @pytest.mark.unit
    def test_fields_are_frozen(self):
        bundle = ResolvedBundle(name="app", source=BundleSource.USER_HOME)

        with pytest.raises(dataclasses.FrozenInstanceError):
            bundle.name = "other"  # type: ignore[misc]

    @pytest.mark.unit
    def test_defaults(self):
        bundle = ResolvedBundle(name="app", source=BundleSource.PACKAGED)

        assert len(bundle) == 0
        assert bundle.location is None


class TestBundleSource:
    """Test cases for BundleSource."""

    @pytest.mark.unit
    def test_values(self):
        assert BundleSource.WORKING_DIRECTORY.value == "working_directory"
        assert BundleSource.USER_HOME.value == "user_home"
        assert BundleSource.PACKAGED.value == "packaged"
        assert BundleSource("packaged") is BundleSource.PACKAGED
