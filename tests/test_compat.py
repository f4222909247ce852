import pytest

from enclosplit import new_splitter
from enclosplit.compat import PostElementFixer, post_element_fixer
from enclosplit.enclosures import DOUBLE_QUOTES


def test_post_element_fixer_warns():
    with pytest.warns(DeprecationWarning, match="post_element_fixer"):
        fixer = post_element_fixer(lambda text, pos, captured, *segments: (text, True))
    assert isinstance(fixer, PostElementFixer)


def test_post_element_fixer_receives_legacy_arguments():
    calls = []

    def legacy(text, pos, captured, *segments):
        calls.append((text, pos, captured, [s.text for s in segments]))
        return text.upper(), text != "skip"

    with pytest.warns(DeprecationWarning):
        fixer = post_element_fixer(legacy)

    splitter = new_splitter(",", DOUBLE_QUOTES).add_default_policies(fixer)
    assert splitter.split('a,skip,x"y"') == ["A", 'X"Y"']
    assert calls == [
        ("a", 0, 0, ["a"]),
        ("skip", 2, 1, ["skip"]),
        ('x"y"', 7, 1, ["x", '"y"']),
    ]
