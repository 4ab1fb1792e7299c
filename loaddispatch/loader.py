# load-dispatch/loaddispatch/loader.py
"""
Input file parsing for the greedy load dispatcher.

Expected format (whitespace separated, first line is a header):

    loadNumber pickup dropoff
    1 (-50.1,80.0) (90.1,12.2)
    2 (-24.5,-19.2) (98.5,1.8)

The first field is ignored: load ids are the 1-based position of the record.
"""

from __future__ import annotations

import logging
import math
import re
from typing import List

from .errors import InputFormatError, InputIOError
from .models import Load, Point

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_PAIR_RE = re.compile(rf"^\((?P<x>{_NUMBER}),(?P<y>{_NUMBER})\)$")


def parse_point(token: str) -> Point:
    """
    Parse an '(x,y)' token into a point.

    Raises:
        ValueError: If the token is not a parenthesised pair of finite numbers
    """
    match = _PAIR_RE.match(token)
    if match is None:
        raise ValueError(f"Expected '(x,y)', got {token!r}")
    point = (float(match.group("x")), float(match.group("y")))
    if not all(math.isfinite(v) for v in point):
        raise ValueError(f"Coordinates must be finite, got {token!r}")
    return point


def parse_line(line: str, load_id: int) -> Load:
    """
    Parse one record into a Load.

    Args:
        line: Record text (label, pickup pair, drop-off pair)
        load_id: Id to give the load

    Raises:
        ValueError: If the record is malformed
    """
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(f"Expected 3 fields, got {len(parts)}")
    return Load(load_id=load_id, pickup=parse_point(parts[1]), dropoff=parse_point(parts[2]))


def read_loads(path: str, encoding: str = "utf-8") -> List[Load]:
    """
    Load all records from an input file.

    Blank lines are skipped and do not consume an id.

    Args:
        path: Path to the input file
        encoding: Text encoding of the file

    Returns:
        Loads in file order, with ids 1..N

    Raises:
        InputIOError: If the file cannot be read
        InputFormatError: If a record is malformed
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise InputIOError(f"Cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise InputFormatError(f"File is not valid {encoding} text: {e}", path=path) from e

    loads: List[Load] = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            loads.append(parse_line(line, load_id=len(loads) + 1))
        except ValueError as e:
            raise InputFormatError(str(e), path=path, line_number=line_number) from e

    logger.info(f"Read {len(loads)} loads from {path}")
    return loads
