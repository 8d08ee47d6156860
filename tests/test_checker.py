import io
import random

import pytest

from pushswap.checker import apply_instruction, main, run_checker
from pushswap.parsing import InputError
from pushswap.sorting import solve
from pushswap.stacks import Stacks


def _lines(operations):
    return [f"{operation}\n" for operation in operations]


def test_apply_instruction_push_and_rotate():
    stacks = Stacks([1, 2, 3])
    apply_instruction(stacks, "pb\n")
    assert list(stacks.a) == [2, 3]
    assert list(stacks.b) == [1]
    apply_instruction(stacks, "ra\n")
    assert list(stacks.a) == [3, 2]
    apply_instruction(stacks, "pa\n")
    assert list(stacks.a) == [1, 3, 2]
    assert not stacks.b


def test_apply_instruction_reverse_rotate_and_swap():
    stacks = Stacks([1, 2, 3])
    apply_instruction(stacks, "rra\n")
    assert list(stacks.a) == [3, 1, 2]
    apply_instruction(stacks, "sa\n")
    assert list(stacks.a) == [1, 3, 2]


def test_swap_on_short_stack_does_nothing():
    stacks = Stacks([5])
    apply_instruction(stacks, "sa\n")
    apply_instruction(stacks, "ss\n")
    apply_instruction(stacks, "rrr\n")
    assert list(stacks.a) == [5]
    assert not stacks.b


@pytest.mark.parametrize("line", ["ra", "xx\n", "RA\n", "ra \n", "ra\r\n", "\n", "ra\nrb\n"])
def test_apply_instruction_rejects_bad_lines(line):
    stacks = Stacks([2, 1])
    with pytest.raises(InputError):
        apply_instruction(stacks, line)


@pytest.mark.parametrize("size", [2, 3, 5, 20, 50, 150])
def test_run_checker_accepts_solver_output(size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    assert run_checker(values, _lines(solve(values))) is True


def test_run_checker_reports_unsorted():
    assert run_checker([2, 1, 3], []) is False
    assert run_checker([1, 2, 3], []) is True


def test_run_checker_requires_empty_b():
    assert run_checker([1, 2, 3], ["pb\n"]) is False
    assert run_checker([1, 2, 3], ["pb\n", "pa\n"]) is True


def test_run_checker_stops_on_bad_line():
    with pytest.raises(InputError):
        run_checker([2, 1], ["sa\n", "bogus\n"])


def test_main_without_arguments_prints_nothing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert main(["2 1 3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nnope\n"))
    assert main(["2", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["a"], ["12345678901"], ["1 2 3 4 5 6"], [""], ["1-"], ["2147483648"]],
)
def test_main_bad_arguments(monkeypatch, capsys, args):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(args) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_round_trip_with_solver(monkeypatch, capsys):
    values = random.Random(7).sample(range(500), 30)
    script = "".join(_lines(solve(values)))
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([str(value) for value in values]) == 0
    assert capsys.readouterr().out == "OK\n"