# factorworker/parse.py

from __future__ import annotations
import re
from typing import Union

from .errors import ParseError

_DIGITS = re.compile(r"[0-9]+")

def parse_integer(text: Union[str, bytes, bytearray]) -> int:
    """Decimal string -> non-negative int; ParseError on anything else."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError:
            raise ParseError("input is not ASCII text") from None
    if not isinstance(text, str):
        raise ParseError(f"expected a decimal string, got {type(text).__name__}")
    s = text.strip()
    if not s:
        raise ParseError("empty input")
    if not _DIGITS.fullmatch(s):
        raise ParseError(f"not a non-negative decimal integer: {s[:40]!r}")
    try:
        return int(s)
    except ValueError as e:  # int max str digits
        raise ParseError(str(e)) from None

def parse_positive(text: Union[str, bytes, bytearray]) -> int:
    n = parse_integer(text)
    if n < 1:
        raise ParseError("number must be a positive integer")
    return n
