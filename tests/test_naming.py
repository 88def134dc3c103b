"""Unit tests for identifier derivation (wanted.naming).

Tests cover:
- derive_application_identifier (path-derived and explicit names)
- camelize
- derive_module_identifier (derived and explicit dotted names)
- check_module_availability / check_application_availability with a fake registry
- ImportRegistry against the running interpreter
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeRegistry
from wanted.errors import (
    ApplicationNameTaken,
    IdentifierError,
    InvalidApplicationName,
    InvalidModuleName,
    ModuleNameTaken,
)
from wanted.naming import (
    ImportRegistry,
    camelize,
    check_application_availability,
    check_module_availability,
    derive_application_identifier,
    derive_module_identifier,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# derive_application_identifier
# ---------------------------------------------------------------------------


class TestDeriveApplicationIdentifier:
    @pytest.mark.parametrize("name", ["hello_world", "app", "a1", "my_app_2", "x_"])
    def test_valid_override_accepted_unchanged(self, name):
        assert derive_application_identifier("whatever", name) == name

    @pytest.mark.parametrize("name", ["hello_world", "app", "my_app_2"])
    def test_valid_path_segment_accepted_unchanged(self, tmp_path: Path, name):
        assert derive_application_identifier(tmp_path / name) == name

    def test_uses_last_path_segment(self, tmp_path: Path):
        assert derive_application_identifier(tmp_path / "apps" / "hello_world") == "hello_world"

    def test_trailing_slash_ignored(self, tmp_path: Path):
        assert derive_application_identifier(f"{tmp_path}/hello_world/") == "hello_world"

    def test_relative_path_is_expanded(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert derive_application_identifier("hello_world") == "hello_world"

    @pytest.mark.parametrize("name", ["HelloWorld", "hello_World", "helloX", "1app", "_app", "my-app", ""])
    def test_invalid_override_rejected(self, name):
        with pytest.raises(InvalidApplicationName):
            derive_application_identifier("whatever", name)

    @pytest.mark.parametrize("name", ["HelloWorld", "1app", "my-app"])
    def test_invalid_path_segment_rejected(self, tmp_path: Path, name):
        with pytest.raises(InvalidApplicationName) as excinfo:
            derive_application_identifier(tmp_path / name)
        assert excinfo.value.name == name

    def test_path_error_suggests_app_flag(self, tmp_path: Path):
        with pytest.raises(InvalidApplicationName, match="--app"):
            derive_application_identifier(tmp_path / "My-App")

    def test_override_error_does_not_suggest_app_flag(self):
        with pytest.raises(InvalidApplicationName) as excinfo:
            derive_application_identifier("whatever", "My-App")
        assert "--app" not in str(excinfo.value)

    def test_override_wins_over_invalid_path(self, tmp_path: Path):
        assert derive_application_identifier(tmp_path / "Not-Valid", "valid") == "valid"

    @pytest.mark.parametrize("name", ["class", "import", "def", "lambda", "yield"])
    def test_python_keyword_override_rejected(self, name):
        with pytest.raises(InvalidApplicationName, match="keyword"):
            derive_application_identifier("whatever", name)

    def test_python_keyword_path_segment_rejected(self, tmp_path: Path):
        with pytest.raises(InvalidApplicationName, match="--app"):
            derive_application_identifier(tmp_path / "import")

    def test_is_identifier_error(self):
        with pytest.raises(IdentifierError):
            derive_application_identifier("x", "Bad")


# ---------------------------------------------------------------------------
# camelize / derive_module_identifier
# ---------------------------------------------------------------------------


class TestCamelize:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("hello_world", "HelloWorld"),
            ("my_app", "MyApp"),
            ("app", "App"),
            ("a1_b2", "A1B2"),
            ("double__underscore", "DoubleUnderscore"),
            ("trailing_", "Trailing"),
        ],
    )
    def test_camelize(self, name, expected):
        assert camelize(name) == expected


class TestDeriveModuleIdentifier:
    def test_derived_from_app(self):
        assert derive_module_identifier("hello_world") == "HelloWorld"

    @pytest.mark.parametrize("name", ["Foo", "Foo.Bar", "Foo.Bar.Baz", "Foo_1.B2"])
    def test_valid_override(self, name):
        assert derive_module_identifier("ignored", name) == name

    @pytest.mark.parametrize("name", ["foo", "Foo.bar", "Foo..Bar", ".Foo", "Foo.", "Foo-Bar", "1Foo", ""])
    def test_invalid_override(self, name):
        with pytest.raises(InvalidModuleName):
            derive_module_identifier("ignored", name)


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------


class TestCheckModuleAvailability:
    def test_free_name_passes(self):
        registry = FakeRegistry(taken=["Existing"])
        check_module_availability("HelloWorld", registry)
        assert registry.queries == ["HelloWorld"]

    def test_taken_name_rejected(self):
        with pytest.raises(ModuleNameTaken, match="already taken"):
            check_module_availability("Existing", FakeRegistry(taken=["Existing"]))


class TestCheckApplicationAvailability:
    def test_free_name_passes(self):
        registry = FakeRegistry(taken=["json"])
        check_application_availability("hello_world", registry)
        assert registry.queries == ["hello_world"]

    def test_taken_name_rejected(self):
        with pytest.raises(ApplicationNameTaken) as excinfo:
            check_application_availability("json", FakeRegistry(taken=["json"]))
        assert excinfo.value.name == "json"

    def test_stdlib_clash_caught_by_import_registry(self):
        app = derive_application_identifier("whatever", "json")
        check_module_availability(derive_module_identifier(app), ImportRegistry())
        with pytest.raises(ApplicationNameTaken):
            check_application_availability(app, ImportRegistry())


class TestImportRegistry:
    def test_stdlib_module_exists(self):
        assert ImportRegistry().exists("json") is True

    def test_loaded_module_exists(self):
        assert ImportRegistry().exists("pytest") is True

    def test_unknown_name_is_free(self):
        assert ImportRegistry().exists("WantedSurelyMissingModule") is False

    def test_unknown_dotted_name_is_free(self):
        assert ImportRegistry().exists("WantedMissing.Child") is False

    def test_namespace_directory_is_free(self, tmp_path: Path, monkeypatch):
        (tmp_path / "wanted_bare_dir").mkdir()
        monkeypatch.syspath_prepend(str(tmp_path))
        assert ImportRegistry().exists("wanted_bare_dir") is False

    def test_package_directory_is_taken(self, tmp_path: Path, monkeypatch):
        (tmp_path / "wanted_real_pkg").mkdir()
        (tmp_path / "wanted_real_pkg" / "__init__.py").write_text("", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))
        assert ImportRegistry().exists("wanted_real_pkg") is True
