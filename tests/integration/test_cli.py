
import pytest

from logistics.cli import UNKNOWN_MODE_MESSAGE, main, resolve_modes, run
from logistics.decorator import register
from logistics.mode import TransportMode
from logistics.planner import SimpleLogistics


ALL_MODES_OUTPUT = [
    "[SimpleLogistics(ROAD)] Planning delivery...",
    "Truck delivering by road.",
    "[SimpleLogistics(SEA)] Planning delivery...",
    "Ship delivering by sea.",
    "[SimpleLogistics(AIR)] Planning delivery...",
    "Airplane delivering by air.",
]


def run_main(argv):
    lines = []
    exit_code = main(argv=argv, out=lines.append)
    return exit_code, lines


def test_resolve_modes():
    assert resolve_modes(None) == (list(TransportMode), False)
    assert resolve_modes(" Sea ") == ([TransportMode.SEA], False)
    assert resolve_modes("plane") == (list(TransportMode), True)
    assert resolve_modes("") == (list(TransportMode), True)


def test_no_argument():
    exit_code, lines = run_main([])

    assert exit_code == 0
    assert lines == ALL_MODES_OUTPUT


@pytest.mark.parametrize("argv", [["ROAD"], ["road"], ["  rOaD  "], ["road", "sea", "air"]])
def test_single_mode(argv):
    exit_code, lines = run_main(argv)

    assert exit_code == 0
    assert lines == [
        "[SimpleLogistics(ROAD)] Planning delivery...",
        "Truck delivering by road.",
    ]


def test_unknown_mode():
    exit_code, lines = run_main(["plane"])

    assert exit_code == 0
    assert lines == [UNKNOWN_MODE_MESSAGE] + ALL_MODES_OUTPUT
    assert lines[0] == "Unknown mode. Use: road | sea | air. Showing all:"


def test_stdout(capsys):
    assert main(argv=["air"]) == 0

    captured = capsys.readouterr()
    assert captured.out == (
        "[SimpleLogistics(AIR)] Planning delivery...\n"
        "Airplane delivering by air.\n"
    )


@pytest.mark.parametrize("argv", [
    ["-x"],
    ["--log_level"],
    ["-h"],
    ["plane", "--log_level", "FOO"],
])
def test_option_like_mode_is_unknown(argv):
    exit_code, lines = run_main(argv)

    assert exit_code == 0
    assert lines == [UNKNOWN_MODE_MESSAGE] + ALL_MODES_OUTPUT


@pytest.mark.parametrize("argv", [
    ["road", "--log_level"],
    ["road", "-h"],
    ["road", "--help", "--log_level", "FOO"],
])
def test_option_like_extras_are_ignored(argv):
    exit_code, lines = run_main(argv)

    assert exit_code == 0
    assert lines == [
        "[SimpleLogistics(ROAD)] Planning delivery...",
        "Truck delivering by road.",
    ]


def test_run_uses_registered_planner():

    @register("logistics:express")
    class ExpressLogistics(SimpleLogistics):
        pass

    lines = []
    run([TransportMode.SEA], out=lines.append, planner="express")

    assert lines == [
        "[ExpressLogistics(SEA)] Planning delivery...",
        "Ship delivering by sea.",
    ]
