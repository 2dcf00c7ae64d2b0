"""
Sample Parsing
==============
Turns the free text typed into the input area into numeric samples.

Two readers live here:

* ``parse_samples`` is strict: every line that reaches numeric conversion
  must hold exactly two numbers, otherwise the whole parse fails.
* ``switch_order`` is lossy: it swaps the two columns of every well-formed
  line and silently drops everything else. It never fails.
"""
from __future__ import annotations

import logging
import math
from typing import NamedTuple, Sequence

from stressstrainplotter.model.errors import MalformedRowError, NotANumberError

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    """One data point, (strain [%], stress) or (stress, strain [%]) depending on the input order."""
    first: float
    second: float


SampleSequence = Sequence[Sample]


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping empty segments at the very end (a trailing newline)."""
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _to_float(token: str, line_number: int, line: str) -> float:
    # float() also accepts '1_000', 'nan' and 'inf'; none of them are data
    if "_" in token:
        raise NotANumberError(line_number, line, token)
    try:
        value = float(token)
    except ValueError:
        raise NotANumberError(line_number, line, token) from None
    if not math.isfinite(value):
        raise NotANumberError(line_number, line, token)
    return value


def parse_samples(text: str, skip_blank_lines: bool = False) -> tuple[Sample, ...]:
    """
    Parse whitespace separated pairs, one pair per line.

    Args:
        text: Raw multi-line input.
        skip_blank_lines: Skip blank lines instead of rejecting them.

    Returns:
        Samples in input line order. May be empty.

    Raises:
        MalformedRowError: A line does not split into exactly two tokens.
        NotANumberError: A token is not a finite number.
    """
    samples: list[Sample] = []
    for line_number, line in enumerate(_split_lines(text), start=1):
        tokens = line.split()
        if not tokens and skip_blank_lines:
            continue
        if len(tokens) != 2:
            raise MalformedRowError(line_number, line.strip())

        first = _to_float(tokens[0], line_number, line.strip())
        second = _to_float(tokens[1], line_number, line.strip())
        samples.append(Sample(first, second))

    logger.debug(f"Parsed {len(samples)} samples.")
    return tuple(samples)


def switch_order(text: str) -> str:
    """
    Swap the two columns of every line, tab separated.

    Lines that do not split into exactly two tokens are dropped.
    Tokens are copied verbatim, no numeric conversion takes place.
    """
    switched: list[str] = []
    for line in text.split("\n"):
        values = line.split()
        if len(values) == 2:
            switched.append(f"{values[1]}\t{values[0]}\n")
    return "".join(switched)
