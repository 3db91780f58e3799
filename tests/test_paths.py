"""Tests for path shortening."""

from rill.core.paths import shorten_path


def test_short_paths_unchanged():
    assert shorten_path("/usr/bin", False, home="") == "/usr/bin"
    assert shorten_path("/a/b/c", False, home="") == "/a/b/c"
    assert shorten_path("file.txt", False, home="") == "file.txt"


def test_debug_mode_returns_full_path():
    path = "/very/long/path/that/would/normally/be/shortened"
    assert shorten_path(path, True) == path


def test_home_directory_conversion():
    assert shorten_path("/Users/testuser/documents/file.txt", False, home="/Users/testuser") == "~/documents/file.txt"


def test_similar_prefix_is_not_home():
    path = "/Users/testuser2/documents/file.txt"
    assert shorten_path(path, False, home="/Users/testuser") == path


def test_home_from_environment(monkeypatch):
    monkeypatch.setenv("HOME", "/home/dev")
    assert shorten_path("/home/dev/notes.md", False) == "~/notes.md"


def test_long_path_shortening():
    path = "/" + "v" * 40 + "/long/path/with/many/components/file.txt"
    assert shorten_path(path, False, home="") == "/v/l/p/w/m/components/file.txt"


def test_long_relative_path_keeps_no_root():
    path = "alpha/bravo/charlie/delta/echo/foxtrot/golf.txt"
    assert shorten_path(path, False, home="") == "a/b/c/d/e/foxtrot/golf.txt"


def test_long_path_with_few_components_unchanged():
    path = "/" + "x" * 30 + "/" + "y" * 30
    assert shorten_path(path, False, home="") == path


def test_long_home_path_collapses_after_alias():
    home = "/home/someone"
    path = home + "/projects/clients/acme/backend/services/api/handler.py"
    assert shorten_path(path, False, home=home) == "~/p/c/a/b/s/api/handler.py"


def test_path_at_length_limit_unchanged():
    path = "/alpha/bravo/charlie/delta/echo/file.txt"
    assert len(path) == 40
    assert shorten_path(path, False, home="") == path


def test_long_dot_relative_path_keeps_leading_dot():
    path = "./alpha/bravo/charlie/delta/echo/foxtrot.txt"
    assert shorten_path(path, False, home="") == "./a/b/c/d/echo/foxtrot.txt"
