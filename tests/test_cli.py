import io

import pytest

from antfarm.cli import USAGE, main, parse_options

CHAIN_MAP = "3\n##start\ns 0 0\n##end\ne 5 5\na 1 1\ns-a\na-e\n"
DIRECT_MAP = "3\n##start\ns 0 0\n##end\ne 5 5\ns-e\n"


def run(monkeypatch, capsys, text, argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_parse_options_flags():
    options = parse_options(["-r", "-p", "-n", "-x"])
    assert (options.just_steps, options.print_paths, options.hide_moves) == (
        True, True, True
    )
    assert options.print_leaks is False
    assert options.show_help is False


def test_parse_options_help_stops_scan():
    options = parse_options(["-help", "-r"])
    assert options.show_help is True
    assert options.just_steps is False


def test_help(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "", ["-help"])
    assert code == 0
    assert out == USAGE


def test_just_steps(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, CHAIN_MAP, ["-r"])
    assert code == 0
    assert out == "4\n"


def test_direct_link_just_steps(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, DIRECT_MAP, ["-r"])
    assert code == 0
    assert out == "3\n"


def test_full_output_echoes_map_and_moves(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, CHAIN_MAP, [])
    assert code == 0
    assert out.startswith(CHAIN_MAP + "\n")
    moves = out[len(CHAIN_MAP) + 1:].splitlines()
    assert moves[0] == "L1-a "
    assert sum(line.count("L") for line in moves) == 6


def test_hide_moves_with_paths(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, CHAIN_MAP, ["-n", "-p"])
    assert code == 0
    assert "1 path were found" in out
    assert "L1-" not in out
    assert out.endswith("Result: 4 steps\n")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("3\ns 0 0\ne 5 5\ns-e\n", "Commands are wrong"),
        ("3\n##start\ns 0 0\n##end\ne 5 5\n", "There are no connection between start and finish"),
        ("zero\n", "Wrong number of ants"),
        ("3\n##start\ns 0 0\n##end\ne 5 5\ns-x\n", "Wrong link"),
    ],
)
def test_errors(monkeypatch, capsys, text, message):
    code, out = run(monkeypatch, capsys, text, [])
    assert code == 1
    assert out == f"\033[31;1m{message}\x1b[0m\n"