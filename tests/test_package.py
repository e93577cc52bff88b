import sequtils
from sequtils import functional


def test_public_api_reexported():
    for name in functional.__all__:
        assert getattr(sequtils, name) is getattr(functional, name)


def test_top_level_usage():
    values = [4, 4, 2, 9, 1]
    assert sequtils.distinct(values) == [4, 2, 9, 1]
    assert sequtils.top(values, lambda a, b: a - b, 2) == [1, 2]
    assert sequtils.binary_search(sorted(values), 9) == 4
