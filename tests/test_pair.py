from shortpath.pair import Pair, compare_second, natural_order


def test_pair_structural_equality_and_hash():
    assert Pair("a", 1) == Pair("a", 1)
    assert Pair("a", 1) != Pair("a", 2)
    assert len({Pair("a", 1), Pair("a", 1), Pair("b", 1)}) == 2


def test_pair_unpacks_and_prints():
    key, value = Pair("k", 3)
    assert (key, value) == ("k", 3)
    assert str(Pair("k", 3)) == "<k,3>"


def test_natural_order():
    assert natural_order(1, 2) < 0
    assert natural_order(2, 2) == 0
    assert natural_order("b", "a") > 0


def test_compare_second_ignores_first_field():
    assert compare_second(Pair("z", 1), Pair("a", 2)) < 0
    assert compare_second(Pair("z", 2), Pair("a", 2)) == 0
