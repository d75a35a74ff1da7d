"""Arrangement construction: splitting lines until no two cross.

The frame edges and user lines are cut at every crossing so that the result is
a set of fragments meeting only at shared endpoints.
"""

import logging
from collections.abc import Iterable

from gridpolygons.domain import Grid, Line
from gridpolygons.exceptions import DegenerateInputError

logger = logging.getLogger(__name__)


def filter_degenerate_lines(lines: Iterable[Line], strict: bool = False) -> list[Line]:
    """Drop lines whose endpoints coincide.

    Args:
        lines: User lines in input order
        strict: Raise instead of skipping

    Returns:
        Lines with a usable direction, order preserved

    Raises:
        DegenerateInputError: If ``strict`` and a zero-length line is found
    """
    kept: list[Line] = []
    for index, line in enumerate(lines):
        if line.is_degenerate():
            if strict:
                raise DegenerateInputError(line, "endpoints coincide")
            logger.warning("Skipping zero-length line #%d %s", index, line)
            continue
        kept.append(line)
    return kept


def decompose_lines(frame: Iterable[Line], lines: Iterable[Line]) -> list[Line]:
    """Merge lines into an arrangement seeded with ``frame``.

    Each line is cut against every fragment that existed before the line was
    processed. A line crosses an unsplit segment at most once, so pieces
    appended while handling the same line are never scanned again.

    Args:
        frame: Initial fragments, assumed not to cross each other
        lines: Non-degenerate lines to add, in order

    Returns:
        Fragments crossing each other only at shared endpoints
    """
    fragments = list(frame)

    for line in lines:
        candidates = [line]
        existing_count = len(fragments)

        for fragment_index in range(existing_count):
            fragment = fragments[fragment_index]
            # Edges inclusive so that T junctions are detected
            crossing = fragment.intersection(line, True)
            if crossing is None:
                continue

            # A crossing at one of its own endpoints leaves a side untouched
            if not fragment.has_endpoint(crossing):
                head, tail = fragment.split(crossing)
                fragments[fragment_index] = head
                fragments.append(tail)

            candidate_count = len(candidates)
            for candidate_index in range(candidate_count):
                candidate = candidates[candidate_index]
                if candidate.contains(crossing, False):
                    head, tail = candidate.split(crossing)
                    candidates[candidate_index] = head
                    candidates.append(tail)
                    break

        logger.debug("Line %s split into %d fragments", line, len(candidates))
        fragments.extend(candidates)

    return fragments


def decompose_grid(grid: Grid, strict: bool = False) -> list[Line]:
    """Build the arrangement of a grid's frame and lines.

    Args:
        grid: Grid to decompose
        strict: Fail on zero-length lines instead of skipping them

    Returns:
        Fragments covering the frame and every user line

    Examples:
        >>> grid = Grid(10, 10)
        >>> grid.add_line(Line.from_coords(0, 5, 10, 5))
        >>> len(decompose_grid(grid))
        7
    """
    lines = filter_degenerate_lines(grid.lines, strict=strict)
    return decompose_lines(grid.frame_lines(), lines)
