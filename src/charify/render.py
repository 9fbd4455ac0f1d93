import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

import numpy as np

from charify.errors import WriteFailure
from charify.grid import as_brightness_grid
from charify.quantize import build_lookup

logger = logging.getLogger(__name__)


@dataclass
class RenderReport:
    rows: int
    columns: int
    failures: list[WriteFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def charify_grid(charset: Sequence[str], grid: np.ndarray) -> list[str]:
    """Map every brightness sample to its character. Returns one string per row."""
    table = np.array(build_lookup(charset), dtype=object)
    return ["".join(row) for row in table[grid]]


def _write(sink: TextIO, text: str, row: int, column: int | None, fail_fast: bool) -> WriteFailure | None:
    try:
        sink.write(text)
    except OSError as e:
        failure = WriteFailure(row, column, e)
        logger.error("Error writing to destination (%s)", failure)
        if fail_fast:
            raise
        return failure
    return None


def render(charset: Sequence[str], grid: np.ndarray, sink: TextIO, fail_fast: bool = False) -> RenderReport:
    """Write the character rendering of ``grid`` to ``sink``, one line per row.

    Every character and line terminator is written separately. A failed write
    is logged and recorded in the returned report, and rendering carries on
    with the next cell. With ``fail_fast`` the first failure is re-raised
    instead.
    """
    grid = as_brightness_grid(grid)
    # Validates the charset before anything reaches the sink
    lines = charify_grid(charset, grid)
    rows, columns = grid.shape
    report = RenderReport(rows=rows, columns=columns)
    logger.debug("Rendering %dx%d grid with %d-character set", columns, rows, len(charset))

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            failure = _write(sink, char, y, x, fail_fast)
            if failure is not None:
                report.failures.append(failure)
        failure = _write(sink, "\n", y, None, fail_fast)
        if failure is not None:
            report.failures.append(failure)

    return report
