"""Tests for the structured value printer."""

import pytest

from rill.core.modes import DisplayMode
from rill.ui.printer import ValuePrinter


@pytest.fixture
def render(console_factory):
    def _render(params, depth=1, mode=DisplayMode.COMPACT, width=80, terminal=True) -> list[str]:
        console = console_factory(width=width, terminal=terminal)
        ValuePrinter(console).print_params(params, depth, mode)
        return [line.rstrip() for line in console.file.getvalue().splitlines()]

    return _render


def test_scalars_and_inline_array_in_insertion_order(render):
    lines = render({"path": "/a/b/c", "count": 3, "tags": ["x", "y"]})
    assert lines == ["  path: /a/b/c", "  count: 3", "  tags: x, y"]


def test_nested_object_indents(render):
    lines = render({"outer": {"inner": True, "deeper": {"leaf": None}}})
    assert lines == ["  outer:", "    inner: true", "    deeper:", "      leaf: null"]


def test_inline_array_stringifies_scalars(render):
    lines = render({"v": [None, 1.5, False, "s"]}, depth=0)
    assert lines == ["v: null, 1.5, false, s"]


def test_empty_array_is_inline(render):
    assert render({"v": []}, depth=0) == ["v:"]


def test_array_with_objects_is_multiline(render):
    lines = render({"items": [{"a": 1}, 2, "x", [3]]})
    assert lines == [
        "  items:",
        "    -",
        "      a: 1",
        "    - 2",
        '    - "x"',
        "    - [3]",
    ]


def test_string_truncated_to_terminal_width(render):
    """Prefix width is reserved from the budget."""
    lines = render({"k": "a" * 50}, width=20)
    assert lines == ["  k: " + "a" * 15]


def test_inline_array_truncated_as_one_value(render):
    lines = render({"tags": ["alpha", "beta", "gamma", "delta"]}, depth=0, width=20)
    assert lines == ["tags: alpha, beta, g"]


def test_numbers_are_not_truncated(render):
    lines = render({"n": 12345678901234567890}, depth=0, width=8)
    assert lines == ["n: 12345678901234567890"]


def test_full_mode_skips_truncation(render):
    lines = render({"k": "a" * 50}, width=20, mode=DisplayMode.FULL)
    assert lines == ["  k: " + "a" * 50]


def test_unknown_width_skips_truncation(render):
    """Non-terminal output prints values whole."""
    lines = render({"k": "a" * 100}, width=20, terminal=False)
    assert lines == ["  k: " + "a" * 100]


def test_none_or_empty_params_print_nothing(render):
    assert render(None) == []
    assert render({}) == []


def test_unsupported_value_is_an_invariant_violation(render):
    with pytest.raises(AssertionError):
        render({"x": object()})


def test_display_mode_resolve():
    assert DisplayMode.resolve(full=False, debug=False) is DisplayMode.COMPACT
    assert DisplayMode.resolve(full=True, debug=False) is DisplayMode.FULL
    assert DisplayMode.resolve(full=False, debug=True) is DisplayMode.FULL


def test_nested_array_elements_use_compact_json(render):
    lines = render({"v": [[1, 2], {"a": 1}]})
    assert lines == ["  v:", "    - [1,2]", "    -", "      a: 1"]
