import pytest

from enclosplit import ConfigurationError, Enclosure, make_escapable
from enclosplit.enclosures import (
    BACKSLASH,
    DOUBLE_QUOTES,
    DOUBLE_QUOTES_BACKSLASH_ESCAPED,
    DOUBLE_QUOTES_DOUBLE_ESCAPED,
    ENCLOSURES,
    PARENTHESIS,
    SINGLE_QUOTES_DOUBLE_ESCAPED,
)


class TestCatalog:
    def test_catalog_is_populated(self):
        assert len(ENCLOSURES) > 60
        assert ENCLOSURES["DOUBLE_QUOTES"] is DOUBLE_QUOTES
        assert ENCLOSURES["PARENTHESIS"] is PARENTHESIS

    @pytest.mark.parametrize("name", sorted(ENCLOSURES))
    def test_entries_are_well_formed(self, name):
        enc = ENCLOSURES[name]
        assert len(enc.start) == 1
        assert len(enc.end) == 1
        assert (enc.escape is not None) == enc.escapable
        if enc.is_quote:
            assert "QUOTES" in name
        else:
            assert enc.escapable is False

    def test_escape_variants(self):
        assert DOUBLE_QUOTES_BACKSLASH_ESCAPED.escape == BACKSLASH
        assert not DOUBLE_QUOTES_BACKSLASH_ESCAPED.is_double_escaping
        assert DOUBLE_QUOTES_DOUBLE_ESCAPED.is_double_escaping
        assert SINGLE_QUOTES_DOUBLE_ESCAPED.escape == "'"
        assert not DOUBLE_QUOTES.escapable


class TestMakeEscapable:
    def test_returns_copy(self):
        escaped = make_escapable(PARENTHESIS, BACKSLASH)
        assert escaped is not PARENTHESIS
        assert escaped.escapable and escaped.escape == BACKSLASH
        assert escaped.is_bracket_escapable
        assert not PARENTHESIS.escapable

    def test_quote_may_double_escape(self):
        escaped = make_escapable(DOUBLE_QUOTES, '"')
        assert escaped == DOUBLE_QUOTES_DOUBLE_ESCAPED

    @pytest.mark.parametrize("escape", ["(", ")"])
    def test_bracket_cannot_double_escape(self, escape):
        with pytest.raises(ConfigurationError, match="double-escaped"):
            make_escapable(PARENTHESIS, escape)


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"start": "((", "end": ")"},
            {"start": "(", "end": ""},
            {"start": "(", "end": ")", "escapable": True},
            {"start": "(", "end": ")", "escape": "\\"},
            {"start": "(", "end": ")", "escapable": True, "escape": ")"},
        ],
    )
    def test_invalid_enclosures(self, kwargs):
        with pytest.raises(ConfigurationError):
            Enclosure(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            PARENTHESIS.start = "["  # type: ignore[misc]
