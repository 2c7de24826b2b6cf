# ABOUTME: Unit tests for PackagedBundleResolver
# ABOUTME: Tests search path lookup, locale layering and bundles inside installed packages

import sys

import pytest

from propertyutil.implementations.memory import InMemoryFileSystem
from propertyutil.implementations.system import PackagedBundleResolver


class TestPackagedBundleResolver:
    """Test cases for PackagedBundleResolver."""

    @pytest.mark.unit
    def test_resolves_from_search_path(self, tmp_path):
        (tmp_path / "mybundle.properties").write_bytes(b"k=packaged")
        resolver = PackagedBundleResolver(search_path=[str(tmp_path)])

        assert resolver.resolve("mybundle") == {"k": "packaged"}
        assert resolver.describe("mybundle") == str(tmp_path / "mybundle.properties")

    @pytest.mark.unit
    def test_dotted_name_uses_subdirectories(self, tmp_path):
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "c.properties").write_bytes(b"k=dotted")
        resolver = PackagedBundleResolver(search_path=[str(tmp_path)])

        assert resolver.resolve("a.b.c") == {"k": "dotted"}

    @pytest.mark.unit
    def test_first_root_wins_per_file(self, tmp_path):
        first, second = tmp_path / "first", tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "app.properties").write_bytes(b"k=first")
        (second / "app.properties").write_bytes(b"k=second\nonly=second")
        resolver = PackagedBundleResolver(search_path=[str(first), str(second)])

        assert resolver.resolve("app") == {"k": "first"}

    @pytest.mark.unit
    def test_missing_bundle(self, tmp_path):
        resolver = PackagedBundleResolver(search_path=[str(tmp_path)])

        assert resolver.resolve("missing") is None
        assert resolver.describe("missing") is None

    @pytest.mark.unit
    def test_locale_variants_layer_over_plain_file(self):
        fs = InMemoryFileSystem(
            {
                "/pkg/app.properties": "greeting=hello\nfarewell=bye",
                "/pkg/app_fr.properties": "greeting=bonjour",
                "/pkg/app_fr_CA.properties": "farewell=salut",
            }
        )
        resolver = PackagedBundleResolver(search_path=["/pkg"], locale="fr_CA", file_system=fs)

        assert resolver.resolve("app") == {"greeting": "bonjour", "farewell": "salut"}
        assert resolver.describe("app") == "/pkg/app_fr_CA.properties"

    @pytest.mark.unit
    def test_locale_variant_alone_is_enough(self):
        fs = InMemoryFileSystem({"/pkg/app_de.properties": "k=de"})
        resolver = PackagedBundleResolver(search_path=["/pkg"], locale="de_AT", file_system=fs)

        assert resolver.resolve("app") == {"k": "de"}

    @pytest.mark.unit
    def test_unreadable_and_malformed_files_are_skipped(self):
        fs = InMemoryFileSystem(
            {"/second/app.properties": "k=second", "/pkg/app_en.properties": "bad=\\uZZZZ"},
            unreadable=["/first/app.properties"],
        )
        resolver = PackagedBundleResolver(search_path=["/first", "/second", "/pkg"], locale="en", file_system=fs)

        assert resolver.resolve("app") == {"k": "second"}

    @pytest.mark.unit
    def test_defaults_to_sys_path(self, tmp_path, monkeypatch):
        (tmp_path / "syspathbundle.properties").write_bytes(b"k=sys")
        monkeypatch.syspath_prepend(str(tmp_path))
        resolver = PackagedBundleResolver()

        assert resolver.search_path[0] == str(tmp_path)
        assert resolver.resolve("syspathbundle") == {"k": "sys"}

    @pytest.mark.unit
    def test_package_bundle_found_without_importing_package(self, tmp_path, monkeypatch):
        package = tmp_path / "site" / "explodingpkg"
        package.mkdir(parents=True)
        (package / "__init__.py").write_text("raise RuntimeError('package imported')\n")
        (package / "defaults.properties").write_bytes(b"k=packaged")
        monkeypatch.syspath_prepend(str(tmp_path / "site"))
        resolver = PackagedBundleResolver()

        assert resolver.resolve("explodingpkg.defaults") == {"k": "packaged"}
        assert resolver.describe("explodingpkg.defaults") == str(package / "defaults.properties")
        assert "explodingpkg" not in sys.modules

    @pytest.mark.unit
    def test_missing_bundle_in_package_does_not_import_it(self, tmp_path, monkeypatch):
        package = tmp_path / "site" / "explodingpkg2"
        package.mkdir(parents=True)
        (package / "__init__.py").write_text("raise RuntimeError('package imported')\n")
        monkeypatch.syspath_prepend(str(tmp_path / "site"))
        resolver = PackagedBundleResolver()

        assert resolver.resolve("explodingpkg2.conf") is None
        assert "explodingpkg2" not in sys.modules

    @pytest.mark.unit
    def test_unknown_package_is_not_found(self, tmp_path):
        resolver = PackagedBundleResolver(search_path=[str(tmp_path)])

        assert resolver.resolve("no_such_package_for_tests.bundle") is None
