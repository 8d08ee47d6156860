import random
import sys

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(values)
    for line in output.splitlines():
        stacks.apply(line)
    return stacks


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_values_swapped(capsys):
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [["1 1"], ["abc"], ["2147483648"], [""], ["1", "-"], ["3", "2", "3"], ["1-2"]],
)
def test_bad_input_reports_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_random_arguments_are_sorted_by_output(capsys):
    values = random.Random(11).sample(range(-5000, 5000), 100)
    assert main([str(value) for value in values]) == 0
    assert _replay(values, capsys.readouterr().out).is_sorted()


def test_mixed_argument_forms(capsys):
    assert main(["5 -1", "+3", "0 9 4"]) == 0
    stacks = _replay([5, -1, 3, 0, 9, 4], capsys.readouterr().out)
    assert list(stacks.a) == [-1, 0, 3, 4, 5, 9]
    assert not stacks.b


def test_reads_sys_argv_by_default(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["push_swap", "2", "1"])
    assert main() == 0
    assert capsys.readouterr().out == "sa\n"