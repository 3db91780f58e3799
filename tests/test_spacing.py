"""Tests for block spacing transitions."""

import pytest

from rill.core.spacing import BlockKind, advance, needs_separator

KINDS = list(BlockKind)


@pytest.mark.parametrize("nxt", KINDS)
def test_no_separator_at_session_start(nxt):
    assert needs_separator(BlockKind.EMPTY, nxt) is False


def test_tool_call_and_response_stay_adjacent():
    assert needs_separator(BlockKind.TOOL_CALL, BlockKind.TOOL_RESPONSE) is False


@pytest.mark.parametrize("other", [k for k in KINDS if k is not BlockKind.EMPTY])
def test_header_always_separated(other):
    assert needs_separator(BlockKind.HEADER, other) is True
    assert needs_separator(other, BlockKind.HEADER) is True


def test_other_pairs_separated():
    assert needs_separator(BlockKind.TEXT, BlockKind.TEXT) is True
    assert needs_separator(BlockKind.TOOL_RESPONSE, BlockKind.TOOL_CALL) is True
    assert needs_separator(BlockKind.TOOL_RESPONSE, BlockKind.TOOL_RESPONSE) is True
    assert needs_separator(BlockKind.SYSTEM, BlockKind.ERROR) is True


def test_advance_moves_to_next_state():
    state = BlockKind.EMPTY
    sep, state = advance(state, BlockKind.TOOL_CALL)
    assert (sep, state) == (False, BlockKind.TOOL_CALL)
    sep, state = advance(state, BlockKind.TOOL_RESPONSE)
    assert (sep, state) == (False, BlockKind.TOOL_RESPONSE)
    sep, state = advance(state, BlockKind.TEXT)
    assert (sep, state) == (True, BlockKind.TEXT)
