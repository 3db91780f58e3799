"""Blank-line spacing between rendered blocks."""

from enum import Enum, auto


class BlockKind(Enum):
    """Category of the most recently rendered block."""

    EMPTY = auto()
    TEXT = auto()
    TOOL_CALL = auto()
    TOOL_RESPONSE = auto()
    SYSTEM = auto()
    PROMPT = auto()
    HEADER = auto()
    ERROR = auto()


def needs_separator(prev: BlockKind, nxt: BlockKind) -> bool:
    """Whether a blank line goes between a prev block and the next one."""
    match (prev, nxt):
        case (BlockKind.EMPTY, _):
            return False
        case (BlockKind.HEADER, _) | (_, BlockKind.HEADER):
            return True
        case (BlockKind.TOOL_CALL, BlockKind.TOOL_RESPONSE):
            return False
        case _:
            return True


def advance(prev: BlockKind, nxt: BlockKind) -> tuple[bool, BlockKind]:
    """Transition to nxt, returning (separator, new_state)."""
    return needs_separator(prev, nxt), nxt
