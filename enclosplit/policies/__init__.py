"""Ready-made policies for ``Splitter.split`` and ``add_default_policies``."""

from .empties import (
    IGNORE_EMPTIES,
    IGNORE_EMPTY_FIRST,
    IGNORE_EMPTY_INNERS,
    IGNORE_EMPTY_LAST,
    IGNORE_EMPTY_OUTERS,
    NO_EMPTIES,
    NOT_EMPTY_FIRST,
    NOT_EMPTY_INNERS,
    NOT_EMPTY_LAST,
    NOT_EMPTY_OUTERS,
    IgnoreEmpties,
    IgnoreEmptyFirst,
    IgnoreEmptyInners,
    IgnoreEmptyLast,
    IgnoreEmptyOuters,
    NoEmpties,
    NotEmptyFirst,
    NotEmptyInners,
    NotEmptyLast,
    NotEmptyOuters,
)
from .functional import FunctionPolicy, policy
from .quotes import (
    NO_CONTIGUOUS_QUOTES,
    NO_MULTI_QUOTES,
    NO_MULTIS,
    STRIP_QUOTES,
    UNESCAPE_QUOTES,
    NoContiguousQuotes,
    NoMultiQuotes,
    NoMultis,
    StripQuotes,
    UnescapeQuotes,
)
from .trim import TRIM_SPACES, Trim

POLICIES = {
    "TRIM_SPACES": TRIM_SPACES,
    "NO_EMPTIES": NO_EMPTIES,
    "IGNORE_EMPTIES": IGNORE_EMPTIES,
    "NOT_EMPTY_FIRST": NOT_EMPTY_FIRST,
    "IGNORE_EMPTY_FIRST": IGNORE_EMPTY_FIRST,
    "NOT_EMPTY_LAST": NOT_EMPTY_LAST,
    "IGNORE_EMPTY_LAST": IGNORE_EMPTY_LAST,
    "NOT_EMPTY_INNERS": NOT_EMPTY_INNERS,
    "IGNORE_EMPTY_INNERS": IGNORE_EMPTY_INNERS,
    "NOT_EMPTY_OUTERS": NOT_EMPTY_OUTERS,
    "IGNORE_EMPTY_OUTERS": IGNORE_EMPTY_OUTERS,
    "NO_CONTIGUOUS_QUOTES": NO_CONTIGUOUS_QUOTES,
    "NO_MULTI_QUOTES": NO_MULTI_QUOTES,
    "NO_MULTIS": NO_MULTIS,
    "STRIP_QUOTES": STRIP_QUOTES,
    "UNESCAPE_QUOTES": UNESCAPE_QUOTES,
}

__all__ = [
    "POLICIES",
    "FunctionPolicy",
    "policy",
    "Trim",
    "TRIM_SPACES",
    "NoEmpties",
    "NotEmptyFirst",
    "NotEmptyLast",
    "NotEmptyInners",
    "NotEmptyOuters",
    "IgnoreEmpties",
    "IgnoreEmptyFirst",
    "IgnoreEmptyLast",
    "IgnoreEmptyInners",
    "IgnoreEmptyOuters",
    "NO_EMPTIES",
    "NOT_EMPTY_FIRST",
    "NOT_EMPTY_LAST",
    "NOT_EMPTY_INNERS",
    "NOT_EMPTY_OUTERS",
    "IGNORE_EMPTIES",
    "IGNORE_EMPTY_FIRST",
    "IGNORE_EMPTY_LAST",
    "IGNORE_EMPTY_INNERS",
    "IGNORE_EMPTY_OUTERS",
    "NoContiguousQuotes",
    "NoMultiQuotes",
    "NoMultis",
    "StripQuotes",
    "UnescapeQuotes",
    "NO_CONTIGUOUS_QUOTES",
    "NO_MULTI_QUOTES",
    "NO_MULTIS",
    "STRIP_QUOTES",
    "UNESCAPE_QUOTES",
]
