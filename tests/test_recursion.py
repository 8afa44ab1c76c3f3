import pytest

from algodrills.recursion import (
    count753_permutation,
    count753_recursive,
    partial_sum_exists,
    tribo,
    tribo_memo,
)


def test_tribo_20():
    assert tribo(20) == 35890


def test_tribo_negative():
    with pytest.raises(ValueError):
        tribo(-1)


def test_tribo_memo_10():
    assert tribo_memo(10) == [0, 0, 1, 1, 2, 4, 7, 13, 24, 44, 81]


def test_tribo_memo_matches_naive():
    assert tribo_memo(15) == [tribo(i) for i in range(16)]


def test_tribo_memo_short_prefixes():
    assert tribo_memo(10)[:3] == tribo_memo(2)
    assert len(tribo_memo(0)) == 1


def test_tribo_memo_negative():
    with pytest.raises(ValueError):
        tribo_memo(-1)


@pytest.mark.parametrize(
    "k, gold", [(356, 0), (357, 1), (374, 1), (375, 2), (1357, 6)]
)
def test_count753_both(k, gold):
    assert count753_recursive(k) == gold
    assert count753_permutation(k) == gold


def test_count753_four_digit_min():
    assert count753_recursive(3357) == 7


def test_count753_negative():
    with pytest.raises(ValueError):
        count753_recursive(-1)
    with pytest.raises(ValueError):
        count753_permutation(-1)


def test_partial_sum_true():
    assert partial_sum_exists(10, [1, 2, 4, 5, 11]) is True


def test_partial_sum_false():
    assert partial_sum_exists(10, [1, 5, 8, 11]) is False


def test_partial_sum_every_subset_sum_found():
    a = [3, 7, 2]
    for mask in range(1 << len(a)):
        total = sum(x for i, x in enumerate(a) if mask & (1 << i))
        assert partial_sum_exists(total, a)