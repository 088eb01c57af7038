import pytest

from rachel_wrapper.config import Settings
from rachel_wrapper.identifiers import ModulePaths, is_sanitized, sanitize_identifier


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("foo", "foo"),
        ("foo;bar", "foobar"),
        ("../../etc/passwd", "etcpasswd"),
        ("en-wikipedia_for_schools", "en-wikipedia_for_schools"),
        ("<script>alert(1)</script>", "scriptalert1script"),
        ("café mod", "cafmod"),
        ("", ""),
    ],
)
def test_sanitize_strips_disallowed_characters(raw, expected):
    assert sanitize_identifier(raw) == expected


@pytest.mark.parametrize("raw", ["foo;bar", "a b\tc\n", "%2e%2e/x", "über-mod_1"])
def test_sanitize_is_idempotent(raw):
    once = sanitize_identifier(raw)
    assert sanitize_identifier(once) == once
    assert is_sanitized(once)


def test_module_paths_use_sanitized_identifier():
    settings = Settings(module_root="/var/modules", web_module_root="/mods")
    paths = ModulePaths.for_identifier(sanitize_identifier("foo;bar"), settings)

    assert paths.identifier == "foobar"
    assert paths.web_dir == "/mods/foobar"
    assert paths.local_file == "/var/modules/foobar/rachel-index.html"
    assert paths.search_id == "foobar_search"
    assert paths.suggest_url == "/mods/foobar/search/suggest.php"


def test_module_paths_tolerate_trailing_slash_on_web_root():
    settings = Settings(web_module_root="/mods/")
    paths = ModulePaths.for_identifier("foo", settings)
    assert paths.web_dir == "/mods/foo"
