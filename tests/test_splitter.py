from concurrent.futures import ThreadPoolExecutor

from enclosplit import Policy, Splitter, SplitterConfig, new_splitter
from enclosplit.enclosures import DOUBLE_QUOTES, PARENTHESIS
from enclosplit.policies import IGNORE_EMPTIES, STRIP_QUOTES, TRIM_SPACES, policy


def test_config_round_trip():
    config = SplitterConfig(separator=";", enclosures=(PARENTHESIS,))
    splitter = Splitter(config)
    assert splitter.separator == ";"
    assert splitter.enclosures == (PARENTHESIS,)
    assert splitter.default_policies == ()


def test_constructor_defaults_are_deduplicated():
    splitter = Splitter(
        SplitterConfig(separator=","),
        default_policies=(TRIM_SPACES, TRIM_SPACES, IGNORE_EMPTIES),
    )
    assert splitter.default_policies == (TRIM_SPACES, IGNORE_EMPTIES)


def test_add_default_policies_chains_and_dedupes():
    splitter = new_splitter(",")
    assert splitter.add_default_policies(TRIM_SPACES) is splitter
    splitter.add_default_policies(TRIM_SPACES, IGNORE_EMPTIES)
    assert splitter.default_policies == (TRIM_SPACES, IGNORE_EMPTIES)
    assert splitter.split(" a , , b ") == ["a", "b"]


def test_builtin_policies_satisfy_protocol():
    assert isinstance(TRIM_SPACES, Policy)
    assert isinstance(policy(lambda text, part: (text, True)), Policy)


def test_splitter_is_callable():
    splitter = new_splitter(",", DOUBLE_QUOTES)
    assert splitter('"a,b",c', STRIP_QUOTES) == ["a,b", "c"]


def test_defaults_added_during_split_apply_to_next_call():
    splitter = new_splitter(",")
    added = []

    @policy
    def add_trim(text, part):
        if not added:
            added.append(True)
            splitter.add_default_policies(TRIM_SPACES)
        return text, True

    assert splitter.split(" a , b ", add_trim) == [" a ", " b "]
    assert splitter.split(" a , b ") == ["a", "b"]


def test_concurrent_splits_are_independent():
    splitter = new_splitter(",", PARENTHESIS, DOUBLE_QUOTES)
    splitter.add_default_policies(TRIM_SPACES)
    inputs = [
        f'item{i}, (x,{i}) , "q,{i}"' if i % 2 else f"{i},,{i}" for i in range(200)
    ]

    def expected(i):
        if i % 2:
            return [f"item{i}", f"(x,{i})", f'"q,{i}"']
        return [str(i), "", str(i)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(splitter.split, inputs))

    assert results == [expected(i) for i in range(200)]


def test_concurrent_default_updates():
    splitter = new_splitter(",")
    extras = [policy(lambda text, part: (text, True)) for _ in range(50)]

    def work(p):
        splitter.add_default_policies(p)
        return splitter.split("a,b")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(work, extras))

    assert all(r == ["a", "b"] for r in results)
    assert set(map(id, splitter.default_policies)) == set(map(id, extras))
