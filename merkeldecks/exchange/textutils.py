"""Small console and text helpers used by the exchange simulator."""

import math
import os
import re
import struct
import subprocess
import sys

BREAK_LINE = "=" * 100

_DATE_PATTERN = re.compile(r"[0-9]{4}(-[0-9]{2}(-[0-9]{2})?)?")
_WHITESPACE = " \t\n\v\f\r"


def _stream(out):
    return sys.stdout if out is None else out


def print_break(out=None):
    """Write a line of 100 '=' characters."""
    print(BREAK_LINE, file=_stream(out))


def is_number(text):
    """Return True if text holds only ASCII digits and at most one '.'."""
    seen_point = False
    for ch in text:
        if "0" <= ch <= "9":
            continue
        if ch == "." and not seen_point:
            seen_point = True
            continue
        return False
    return True


def is_date(text):
    """Return True if the trimmed text looks like YYYY, YYYY-MM or YYYY-MM-DD."""
    return _DATE_PATTERN.fullmatch(trim(text)) is not None


def to_rounded_string(num, precision):
    """Format num, taken at single precision, with a fixed number of decimals."""
    try:
        value = struct.unpack("f", struct.pack("f", num))[0]
    except OverflowError:
        value = math.copysign(math.inf, num)
    return f"{value:.{precision}f}"


def trim(text):
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def clear_console():
    """Clear the terminal."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def delete_line(out=None):
    """Move the cursor up one line and erase it."""
    stream = _stream(out)
    stream.write("\033[A\033[2K\r")
    stream.flush()