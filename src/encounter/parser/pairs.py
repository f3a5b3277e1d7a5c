"""
Scanner for semicolon separated `id;name` listings.

Some pages are served as plain text, one record per line:

    12;Alice
    15;Bob

Lines that do not split into exactly two fields, or whose first field does not
start with a digit, are skipped. Only a line feed (optionally preceded by a
carriage return) ends a line; other control characters stay part of the field.
"""
import logging
import re
from typing import Callable, Optional, TypeVar

from src.encounter.parser.convertors import digits_to_int

T = TypeVar('T')

LEADING_DIGITS = re.compile(r"^\d+")


def parse_id_name(pair: list[str]) -> dict:
    """Convert an `[id, name]` pair to `{'id': int, 'name': str}`; an id without leading digits is 0."""
    match = LEADING_DIGITS.match(pair[0])
    return {'id': digits_to_int(match.group()) if match else 0, 'name': pair[-1].strip()}


def parse_delimited_pairs(raw_text: str, post_process: Callable[[list[str]], Optional[T]]) -> list[T]:
    result: list[T] = []
    for line in raw_text.split("\n"):
        line = line.removesuffix("\r")
        fields = line.split(";")
        if len(fields) != 2 or not LEADING_DIGITS.match(fields[0]):
            if line.strip():
                logging.debug("Skipping malformed line %r", line)
            continue
        value = post_process(fields)
        if value is not None:
            result.append(value)
    return result
