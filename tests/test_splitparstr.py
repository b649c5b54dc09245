import pytest

from bn128kit.splitparstr import remove_pars, split_par_str


def test_split_in_2():
    assert split_par_str("123,456") == ["123", "456"]


def test_split_in_3():
    assert split_par_str("123,456,789") == ["123", "456", "789"]


def test_split_in_2_in_parenthesis():
    assert split_par_str("(123,456)") == ["123", "456"]


def test_split_in_2_in_many_parenthesis():
    assert split_par_str("(((123,456),(789,abc)))") == ["123,456", "789,abc"]


def test_split_and_pad():
    v = split_par_str(" ( (), ((123) , 456)  , (789 , abc) )  ")
    assert v == ["", "(123),456", "789,abc"]


def test_f12_point():
    v6 = split_par_str(" (((1,2) , (3,4), (5,6))   ,   ((7,8) , (9,10) , (11,12))) ")
    v6_0 = split_par_str(v6[0])
    v6_1 = split_par_str(v6[1])
    leaves = [split_par_str(part) for part in v6_0 + v6_1]
    assert leaves == [
        ["1", "2"],
        ["3", "4"],
        ["5", "6"],
        ["7", "8"],
        ["9", "10"],
        ["11", "12"],
    ]


def test_remove_pars_nested():
    assert remove_pars("((1))") == "1"


def test_remove_pars_empty_pair():
    assert remove_pars("()") == ""


def test_remove_pars_keeps_unwrapped_text():
    assert remove_pars("(1),(2)") == "(1),(2)"


def test_remove_pars_unbalanced_raises():
    with pytest.raises(ValueError):
        remove_pars("a)")


def test_single_element_raises():
    with pytest.raises(ValueError):
        split_par_str("(5)")