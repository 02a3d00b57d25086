import io

import pytest

from merkeldecks.exchange import textutils
from merkeldecks.exchange.textutils import (
    clear_console,
    delete_line,
    is_date,
    is_number,
    print_break,
    to_rounded_string,
    trim,
)


def test_print_break_writes_hundred_equals():
    out = io.StringIO()
    print_break(out)
    assert out.getvalue() == "=" * 100 + "\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("12.5", True),
        ("", True),
        (".", True),
        ("1.2.3", False),
        ("-5", False),
        ("1e5", False),
        ("abc", False),
        (" 12", False),
    ],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2020", True),
        ("2020-03", True),
        ("2020-03-17", True),
        ("  2020-03-17 \n", True),
        ("2020/03/17", False),
        ("20-03-17", False),
        ("2020-3-17", False),
        ("2020-03-17-01", False),
    ],
)
def test_is_date(text, expected):
    assert is_date(text) is expected


def test_to_rounded_string_pads_decimals():
    assert to_rounded_string(2.5, 3) == "2.500"


def test_to_rounded_string_zero_precision():
    assert to_rounded_string(1.0, 0) == "1"


@pytest.mark.parametrize("value", [0.125, 3.75, 100.5, 42.0])
@pytest.mark.parametrize("precision", [1, 2, 4])
def test_to_rounded_string_round_trip(value, precision):
    text = to_rounded_string(value, precision)
    assert len(text.split(".")[1]) == precision
    assert float(text) == pytest.approx(value, abs=10 ** -precision)


def test_to_rounded_string_overflow_is_infinite():
    assert to_rounded_string(1e300, 2) == "inf"


def test_trim_strips_whitespace():
    assert trim("  hello \t\n") == "hello"
    assert trim("\v\fa b\r") == "a b"


def test_trim_is_idempotent():
    once = trim("\t  spaced out  \n")
    assert trim(once) == once


def test_delete_line_writes_escape_sequence():
    out = io.StringIO()
    delete_line(out)
    assert out.getvalue() == "\033[A\033[2K\r"


def test_clear_console_posix_writes_escape(monkeypatch, capsys):
    monkeypatch.setattr(textutils.os, "name", "posix")
    clear_console()
    assert "\033[2J" in capsys.readouterr().out


def test_clear_console_windows_runs_cls_without_escape(monkeypatch, capsys):
    commands = []

    def fake_run(*args, **kwargs):
        commands.append(args[0] if args else kwargs.get("args"))

    monkeypatch.setattr(textutils.os, "name", "nt")
    monkeypatch.setattr(textutils.subprocess, "run", fake_run)
    clear_console()
    written = capsys.readouterr().out
    assert "\033[2J" not in written
    assert commands == ["cls"]