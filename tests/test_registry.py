import pytest

from enclosplit import ConfigurationError, Enclosure, Splitter, SplitterConfig, new_splitter
from enclosplit.enclosures import (
    CURLY_BRACKETS,
    DOUBLE_QUOTES,
    DOUBLE_QUOTES_DOUBLE_ESCAPED,
    PARENTHESIS,
)
from enclosplit.stages.registry import EnclosureRegistry


def test_lookups():
    registry = EnclosureRegistry.build([PARENTHESIS, DOUBLE_QUOTES])
    assert registry.opener("(") is PARENTHESIS
    assert registry.closer(")") is PARENTHESIS
    assert registry.opener('"') is DOUBLE_QUOTES
    assert registry.closer('"') is DOUBLE_QUOTES
    assert registry.opener("x") is None
    assert registry.closer("(") is None


def test_duplicate_start():
    with pytest.raises(ConfigurationError) as exc_info:
        new_splitter(",", PARENTHESIS, Enclosure(start="(", end="]"))
    assert str(exc_info.value) == "existing start enclosure ('(' in enclosures[1])"
    assert exc_info.value.index == 1


def test_duplicate_end():
    with pytest.raises(ConfigurationError) as exc_info:
        new_splitter(",", CURLY_BRACKETS, PARENTHESIS, Enclosure(start="[", end=")"))
    assert str(exc_info.value) == "existing end enclosure (')' in enclosures[2])"


def test_same_quote_twice_collides():
    with pytest.raises(ConfigurationError):
        new_splitter(",", DOUBLE_QUOTES, DOUBLE_QUOTES_DOUBLE_ESCAPED)


def test_none_entries_are_skipped_but_counted():
    splitter = new_splitter(",", None, PARENTHESIS)
    assert splitter.enclosures == (PARENTHESIS,)
    with pytest.raises(ConfigurationError) as exc_info:
        new_splitter(",", None, PARENTHESIS, None, PARENTHESIS)
    assert exc_info.value.index == 3


@pytest.mark.parametrize("separator", ["", ",,", None])
def test_separator_must_be_one_char(separator):
    with pytest.raises(ConfigurationError):
        Splitter(SplitterConfig(separator=separator))
