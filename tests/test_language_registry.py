import pytest

from snippetvault import language_registry
from snippetvault.errors import UnsupportedLanguage


def test_known_languages_return_registered_extension():
    for entry in language_registry.list_supported():
        assert language_registry.extension_for(entry.name) == entry.extension
    assert language_registry.extension_for("python") == "py"
    assert language_registry.extension_for("rust") == "rs"
    assert language_registry.extension_for("c#") == "cs"


def test_unknown_language_is_rejected():
    for name in ("cobol", "", "Python", "PYTHON", "html and css"):
        with pytest.raises(UnsupportedLanguage) as info:
            language_registry.extension_for(name)
        assert info.value.language == name


def test_registry_names_are_unique_and_shell_friendly():
    names = [entry.name for entry in language_registry.list_supported()]
    assert len(names) == len(set(names))
    for name in names:
        assert name and " " not in name and "/" not in name and "_" not in name


def test_list_supported_returns_a_copy():
    first = language_registry.list_supported()
    first.clear()
    assert language_registry.list_supported()
