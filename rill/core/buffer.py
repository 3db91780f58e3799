"""Markdown buffer for streaming text: flushes on empty lines."""

from __future__ import annotations

import codecs

PARAGRAPH_BREAK = "\n\n"


class MarkdownBuffer:
    """Accumulates streamed chunks and releases them at paragraph boundaries.

    Content is held until an empty line (double newline) arrives. Everything up
    to and including the last empty line is released in one piece, so a block
    is never split across two renders.

        >>> buf = MarkdownBuffer()
        >>> buf.push("Hello\\n") is None
        True
        >>> buf.push("\\nWorld")
        'Hello\\n\\n'
        >>> buf.flush()
        'World'
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def push(self, chunk: str | bytes) -> str | None:
        """Add a chunk, returning everything up to the last empty line if any."""
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        elif chunk:
            # Text arriving mid-character ends the pending byte sequence
            chunk = self._decoder.decode(b"", final=True) + chunk
            self._decoder.reset()
        if not chunk:
            return None
        self._buffer += chunk

        idx = self._buffer.rfind(PARAGRAPH_BREAK)
        if idx == -1:
            return None
        split = idx + len(PARAGRAPH_BREAK)
        ready, self._buffer = self._buffer[:split], self._buffer[split:]
        return ready

    def flush(self) -> str:
        """Return and clear whatever is left (end of stream)."""
        rest = self._buffer + self._decoder.decode(b"", final=True)
        self._buffer = ""
        self._decoder.reset()
        return rest

    @property
    def pending(self) -> str:
        """Text held back waiting for a boundary."""
        return self._buffer

    def __bool__(self) -> bool:
        return bool(self._buffer)
