import io

import pytest

from pushswap.stacks import Operation, Stacks


def make(a=(), b=()):
    stream = io.StringIO()
    return Stacks(a, b, output=stream), stream


def test_sa_swaps_top_and_prints():
    stacks, out = make([1, 2, 3])
    assert stacks.sa() is True
    assert list(stacks.a) == [2, 1, 3]
    assert out.getvalue() == "sa\n"


def test_sa_quiet_prints_nothing():
    stacks, out = make([1, 2])
    stacks.sa(quiet=True)
    assert list(stacks.a) == [2, 1]
    assert out.getvalue() == ""


def test_sa_on_single_is_silent_noop():
    stacks, out = make([5])
    assert stacks.sa() is False
    assert list(stacks.a) == [5]
    assert out.getvalue() == ""


def test_sb_swaps_b():
    stacks, out = make([], [4, 5, 6])
    stacks.sb()
    assert list(stacks.b) == [5, 4, 6]
    assert out.getvalue() == "sb\n"


def test_ss_swaps_both_and_prints_once():
    stacks, out = make([1, 2], [3, 4])
    stacks.ss()
    assert list(stacks.a) == [2, 1]
    assert list(stacks.b) == [4, 3]
    assert out.getvalue() == "ss\n"


def test_ss_on_empty_still_prints():
    stacks, out = make()
    assert stacks.ss() is False
    assert out.getvalue() == "ss\n"


def test_pb_then_pa_round_trip():
    stacks, out = make([1, 2, 3])
    stacks.pb()
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]
    stacks.pa()
    assert list(stacks.a) == [1, 2, 3]
    assert list(stacks.b) == []
    assert out.getvalue() == "pb\npa\n"


def test_push_from_empty_is_silent():
    stacks, out = make([1])
    assert stacks.pa() is False
    assert list(stacks.a) == [1]
    assert out.getvalue() == ""


def test_ra_moves_top_to_bottom():
    stacks, out = make([1, 2, 3])
    stacks.ra()
    assert list(stacks.a) == [2, 3, 1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    stacks, out = make([1, 2, 3])
    stacks.rra()
    assert list(stacks.a) == [3, 1, 2]
    assert out.getvalue() == "rra\n"


@pytest.mark.parametrize("values", [[1, 2], [3, 1, 2], [9, 8, 7, 6, 5]])
def test_rotate_and_reverse_are_inverse(values):
    stacks, _ = make(values, values)
    stacks.ra()
    stacks.rra()
    stacks.rb()
    stacks.rrb()
    assert list(stacks.a) == values
    assert list(stacks.b) == values


def test_full_rotation_restores():
    values = [4, 8, 15, 16]
    stacks, _ = make(values)
    for _ in values:
        stacks.ra(quiet=True)
    assert list(stacks.a) == values


def test_rr_and_rrr_print_their_names():
    stacks, out = make([1, 2, 3], [4, 5])
    stacks.rr()
    assert list(stacks.a) == [2, 3, 1]
    assert list(stacks.b) == [5, 4]
    stacks.rrr()
    assert list(stacks.a) == [1, 2, 3]
    assert list(stacks.b) == [4, 5]
    assert out.getvalue() == "rr\nrrr\n"


def test_apply_accepts_names():
    stacks, out = make([1, 2])
    stacks.apply("sa")
    stacks.apply(Operation.PB)
    assert list(stacks.a) == [1]
    assert list(stacks.b) == [2]
    assert out.getvalue() == "sa\npb\n"


def test_apply_rejects_unknown_name():
    stacks, _ = make([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_operation_values():
    assert Operation("rrr") is Operation.RRR
    assert [op.value for op in Operation] == [
        "sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr",
    ]


def test_operations_preserve_elements():
    stacks, _ = make([5, 3, 9, 1], [7, 2])
    for op in Operation:
        stacks.apply(op, quiet=True)
    assert sorted(list(stacks.a) + list(stacks.b)) == [1, 2, 3, 5, 7, 9]


def test_default_output_is_stdout(capsys):
    stacks = Stacks([2, 1])
    stacks.sa()
    assert capsys.readouterr().out == "sa\n"