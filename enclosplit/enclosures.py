"""Common quote and bracket enclosures.

Each constant can be passed straight to ``new_splitter``::

    splitter = new_splitter(",", DOUBLE_QUOTES_DOUBLE_ESCAPED)

``ENCLOSURES`` maps the constant names to the enclosures, which is what the
command line front end resolves ``--enclosure`` against.
"""

from __future__ import annotations

from dataclasses import replace

from .errors import ConfigurationError
from .types import Enclosure

BACKSLASH = "\\"


def make_escapable(enclosure: Enclosure, escape: str) -> Enclosure:
    """Return an escapable copy of ``enclosure``.

    Args:
        enclosure: Enclosure to copy
        escape: Escape character; for quotes this may equal the end
            character (double-escaping, as in CSV)

    Raises:
        ConfigurationError: If ``enclosure`` is a bracket and ``escape`` is its
            start or end character (nested brackets could not be detected)
    """
    if not enclosure.is_quote and escape in (enclosure.start, enclosure.end):
        raise ConfigurationError("bracket enclosures cannot be double-escaped")
    return replace(enclosure, escapable=True, escape=escape)


def _quote(start: str, end: str) -> Enclosure:
    return Enclosure(start=start, end=end, is_quote=True)


def _bracket(start: str, end: str) -> Enclosure:
    return Enclosure(start=start, end=end)


# Quotes
DOUBLE_QUOTES = _quote('"', '"')
DOUBLE_QUOTES_BACKSLASH_ESCAPED = make_escapable(DOUBLE_QUOTES, BACKSLASH)
DOUBLE_QUOTES_DOUBLE_ESCAPED = make_escapable(DOUBLE_QUOTES, '"')
SINGLE_QUOTES = _quote("'", "'")
SINGLE_QUOTES_BACKSLASH_ESCAPED = make_escapable(SINGLE_QUOTES, BACKSLASH)
SINGLE_QUOTES_DOUBLE_ESCAPED = make_escapable(SINGLE_QUOTES, "'")
SINGLE_INVERTED_QUOTES = _quote("`", "`")
SINGLE_INVERTED_QUOTES_BACKSLASH_ESCAPED = make_escapable(
    SINGLE_INVERTED_QUOTES, BACKSLASH
)
SINGLE_INVERTED_QUOTES_DOUBLE_ESCAPED = make_escapable(SINGLE_INVERTED_QUOTES, "`")
DOUBLE_POINTING_ANGLE_QUOTES = _quote("«", "»")
SINGLE_POINTING_ANGLE_QUOTES = _quote("‹", "›")
SINGLE_POINTING_ANGLE_QUOTES_BACKSLASH_ESCAPED = make_escapable(
    SINGLE_POINTING_ANGLE_QUOTES, BACKSLASH
)
LEFT_RIGHT_DOUBLE_DOUBLE_QUOTES = _quote("“", "”")
LEFT_RIGHT_DOUBLE_SINGLE_QUOTES = _quote("‘", "’")
LEFT_RIGHT_DOUBLE_PRIME_QUOTES = _quote("〝", "〞")
SINGLE_LOW_HIGH_9_QUOTES = _quote("‚", "‛")
DOUBLE_LOW_HIGH_9_QUOTES = _quote("„", "‟")
SUBSTITUTION_QUOTES = _quote("⸂", "⸃")
DOTTED_SUBSTITUTION_QUOTES = _quote("⸄", "⸅")
TRANSPOSITION_QUOTES = _quote("⸉", "⸊")
RAISED_OMISSION_QUOTES = _quote("⸌", "⸍")
LOW_PARAPHRASE_QUOTES = _quote("⸜", "⸝")
HEAVY_ORNAMENTAL_POINTING_ANGLE_QUOTES = _quote("❮", "❯")

# Brackets
PARENTHESIS = _bracket("(", ")")
CURLY_BRACKETS = _bracket("{", "}")
SQUARE_BRACKETS = _bracket("[", "]")
LT_GT_ANGLE_BRACKETS = _bracket("<", ">")
LEFT_RIGHT_POINTING_ANGLE_BRACKETS = _bracket("〈", "〉")
SUBSCRIPT_PARENTHESIS = _bracket("₍", "₎")
SUPERSCRIPT_PARENTHESIS = _bracket("⁽", "⁾")
SMALL_PARENTHESIS = _bracket("﹙", "﹚")
SMALL_CURLY_BRACKETS = _bracket("﹛", "﹜")
DOUBLE_PARENTHESIS = _bracket("⸨", "⸩")
MATH_WHITE_SQUARE_BRACKETS = _bracket("⟦", "⟧")
MATH_ANGLE_BRACKETS = _bracket("⟨", "⟩")
MATH_DOUBLE_ANGLE_BRACKETS = _bracket("⟪", "⟫")
MATH_WHITE_TORTOISE_SHELL_BRACKETS = _bracket("⟬", "⟭")
MATH_FLATTENED_PARENTHESIS = _bracket("⟮", "⟯")
ORNATE_PARENTHESIS = _bracket("﴾", "﴿")
ANGLE_BRACKETS = _bracket("〈", "〉")
DOUBLE_ANGLE_BRACKETS = _bracket("《", "》")
FULL_WIDTH_PARENTHESIS = _bracket("（", "）")
FULL_WIDTH_SQUARE_BRACKETS = _bracket("［", "］")
FULL_WIDTH_CURLY_BRACKETS = _bracket("｛", "｝")
SUBSTITUTION_BRACKETS = _bracket("⸂", "⸃")
DOTTED_SUBSTITUTION_BRACKETS = _bracket("⸄", "⸅")
TRANSPOSITION_BRACKETS = _bracket("⸉", "⸊")
RAISED_OMISSION_BRACKETS = _bracket("⸌", "⸍")
LOW_PARAPHRASE_BRACKETS = _bracket("⸜", "⸝")
SQUARE_WITH_QUILL_BRACKETS = _bracket("⁅", "⁆")
WHITE_PARENTHESIS = _bracket("⦅", "⦆")
WHITE_CURLY_BRACKETS = _bracket("⦃", "⦄")
WHITE_SQUARE_BRACKETS = _bracket("〚", "〛")
WHITE_LENTICULAR_BRACKETS = _bracket("〖", "〗")
WHITE_TORTOISE_SHELL_BRACKETS = _bracket("〘", "〙")
FULL_WIDTH_WHITE_PARENTHESIS = _bracket("｟", "｠")
BLACK_TORTOISE_SHELL_BRACKETS = _bracket("⦗", "⦘")
BLACK_LENTICULAR_BRACKETS = _bracket("【", "】")
POINTING_CURVED_ANGLE_BRACKETS = _bracket("⧼", "⧽")
TORTOISE_SHELL_BRACKETS = _bracket("〔", "〕")
SMALL_TORTOISE_SHELL_BRACKETS = _bracket("﹝", "﹞")
Z_NOTATION_IMAGE_BRACKETS = _bracket("⦇", "⦈")
Z_NOTATION_BINDING_BRACKETS = _bracket("⦉", "⦊")
MEDIUM_ORNAMENTAL_PARENTHESIS = _bracket("❨", "❩")
LIGHT_ORNAMENTAL_TORTOISE_SHELL_BRACKETS = _bracket("❲", "❳")
MEDIUM_ORNAMENTAL_FLATTENED_PARENTHESIS = _bracket("❪", "❫")
MEDIUM_ORNAMENTAL_POINTING_ANGLE_BRACKETS = _bracket("❬", "❭")
MEDIUM_ORNAMENTAL_CURLY_BRACKETS = _bracket("❴", "❵")
HEAVY_ORNAMENTAL_POINTING_ANGLE_BRACKETS = _bracket("❰", "❱")

ENCLOSURES: dict[str, Enclosure] = {
    name: value
    for name, value in sorted(globals().items())
    if isinstance(value, Enclosure)
}
