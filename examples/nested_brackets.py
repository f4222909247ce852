#!/usr/bin/env python3
"""
Split argument lists that contain nested calls, lists and strings.

Shows the segments each part is made of, and a custom policy written with
the ``policy`` decorator.

Usage:
    python examples/nested_brackets.py
"""

from enclosplit import CapturedPart, new_splitter
from enclosplit.enclosures import (
    CURLY_BRACKETS,
    DOUBLE_QUOTES_BACKSLASH_ESCAPED,
    PARENTHESIS,
    SQUARE_BRACKETS,
)
from enclosplit.policies import IGNORE_EMPTY_LAST, TRIM_SPACES, policy


@policy
def show_segments(text: str, part: CapturedPart) -> tuple[str, bool]:
    """Print the segments of every part without changing it."""
    print(f"  part at {part.char_start}: {text!r}")
    for seg in part.segments:
        print(f"    {seg.kind.value:8} {seg.char_start:3}-{seg.char_end:<3} {seg.text!r}")
    return text, True


def main():
    """Split a few argument lists."""
    splitter = new_splitter(
        ",",
        PARENTHESIS,
        SQUARE_BRACKETS,
        CURLY_BRACKETS,
        DOUBLE_QUOTES_BACKSLASH_ESCAPED,
    )
    splitter.add_default_policies(TRIM_SPACES, IGNORE_EMPTY_LAST)

    samples = [
        'f(a, b), [1, 2, (3, 4)], {"k": "v, w"}',
        '"say \\"a, b\\"", g(h(i, j)), ',
    ]
    for text in samples:
        print("=" * 60)
        print(f"Input: {text}")
        parts = splitter.split(text, show_segments)
        print(f"Result: {parts}")


if __name__ == "__main__":
    main()
