from __future__ import annotations

from typing import Iterator

from .stream import Stream, stream


@stream
def from_text(text: str, strip: bool = True) -> Iterator[str]:
    """Stream the lines of a block of text.

    Args:
        text: The text to split into lines.
        strip: Whether to strip surrounding whitespace from each line.

    Examples:
        >>> list(from_text("  a \\n\\nb\\n"))
        ['a', '', 'b']
        >>> list(from_text(" a\\n", strip=False))
        [' a']
    """
    for line in text.splitlines():
        yield line.strip() if strip else line


def non_empty_lines(text: str) -> Stream[str]:
    """Stream the stripped, non-blank lines of a block of text.

    Examples:
        >>> list(non_empty_lines("\\nA Y\\n  \\nB X\\n"))
        ['A Y', 'B X']
    """
    return from_text(text) % bool


__all__ = ("from_text", "non_empty_lines")
