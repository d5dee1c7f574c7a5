import io

import pytest

from neuronet.console import interactive_loop, parse_line
from neuronet.model import Network


def test_parse_line():
    assert parse_line("0 1.5  -2\n") == [0.0, 1.5, -2.0]
    with pytest.raises(ValueError):
        parse_line("1 x")


def test_interactive_loop_prints_first_output(rng):
    network = Network([2, 2, 1], rng=rng)
    stream = io.StringIO("0 1\n1 1\n\n1 0\n")
    out = io.StringIO()

    count = interactive_loop(network, stream, out)

    printed = out.getvalue().splitlines()
    assert count == 2, "a blank line ends the loop"
    assert printed == [str(network.run([0.0, 1.0])[0]), str(network.run([1.0, 1.0])[0])]


def test_interactive_loop_reports_bad_lines(rng):
    network = Network([2, 1], rng=rng)
    stream = io.StringIO("abc\n1 2 3\n1 0")
    out = io.StringIO()

    count = interactive_loop(network, stream, out)

    printed = out.getvalue().splitlines()
    assert count == 1
    assert printed[0].startswith("輸入錯誤")
    assert printed[1].startswith("輸入錯誤")
    assert printed[2] == str(network.run([1.0, 0.0])[0])


def test_interactive_loop_empty_output_layer(rng):
    network = Network([2, 0], rng=rng)
    out = io.StringIO()

    assert interactive_loop(network, io.StringIO("1 0\n"), out) == 1
    assert out.getvalue().splitlines() == ["[]"]
