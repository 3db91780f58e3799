"""Width-aware truncation that never splits a character."""

import unicodedata


def safe_truncate(text: str, max_width: int) -> str:
    """Cut text to at most max_width characters.

    Works on codepoints, so a multi-byte character is never split. If the cut
    would separate a base character from its combining marks, the whole cluster
    is dropped. No ellipsis is added.
    """
    max_width = max(max_width, 0)
    if len(text) <= max_width:
        return text
    end = max_width
    # Step back to the base character so the slice excludes the whole cluster
    while end > 0 and unicodedata.combining(text[end]):
        end -= 1
    return text[:end]
