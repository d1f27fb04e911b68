"""
Line-oriented readers for contest input files.

Every call consumes exactly one line of the underlying text file (the grid
reader consumes one line per row). Tokens are separated by any whitespace.
Only ASCII digits are accepted in numbers.
"""
import logging
import re
import numpy

from typing import List, Optional, TextIO

from swinging_wild.errors import FormatError

logger = logging.getLogger(__name__)

INT_TOKEN = re.compile(r"[+-]?[0-9]+")
FLOAT_TOKEN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
INT64 = numpy.iinfo(numpy.int64)


class LineReader(object):
    """
    Wrap an open text file and keep track of the current line number,
    so that format errors can point at the offending line.
    """

    def __init__(self, file_handler: TextIO):
        self.file_handler = file_handler
        self.line_number = 0

    def read_line(self) -> str:
        try:
            line = self.file_handler.readline()
        except UnicodeDecodeError as e:
            # decoding is buffered, the bad byte may lie a few lines ahead
            raise FormatError(f"invalid text encoding: {e.reason}") from e

        if line == "":
            raise FormatError("unexpected end of file", self.line_number + 1)

        self.line_number += 1
        return line.rstrip("\r\n")

    def read_strings(self) -> List[str]:
        return self.read_line().split()

    def read_ints(self, count: Optional[int] = None) -> List[int]:
        """
        Read the next line as a list of integers.

        Parameters
        ----------
        count : int, optional
            Exact number of integers expected on the line.

        Returns
        -------
        values :
            The parsed integers, in line order.
        """
        line = self.read_line()
        tokens = line.split()
        if not all(INT_TOKEN.fullmatch(tok) for tok in tokens):
            raise FormatError("expected integers", self.line_number, line)

        values = [int(i) for i in tokens]
        self._check_count(values, count, "integer", line)
        return values

    def read_doubles(self, count: Optional[int] = None) -> List[float]:
        line = self.read_line()
        tokens = line.split()
        if not all(FLOAT_TOKEN.fullmatch(tok) for tok in tokens):
            raise FormatError("expected numbers", self.line_number, line)

        values = [float(i) for i in tokens]
        self._check_count(values, count, "number", line)
        return values

    def read_int_grid(self, row_count: int, col_count: int) -> numpy.ndarray:
        """
        Read row_count lines of exactly col_count integers each.

        Parameters
        ----------
        row_count : int

        col_count : int

        Returns
        -------
        grid :
            Integer matrix of shape (row_count, col_count).

        Raises
        ------
        ValueError
            row_count or col_count is negative.
        FormatError
            A row is malformed or holds a value outside the int64 range.
        """
        if row_count < 0 or col_count < 0:
            raise ValueError(f"grid dimensions must be non-negative, got ({row_count}, {col_count})")

        grid = numpy.zeros((row_count, col_count), dtype=numpy.int64)

        for i in range(row_count):
            row = self.read_ints(col_count)
            if any(v < INT64.min or v > INT64.max for v in row):
                raise FormatError("integer out of int64 range", self.line_number)
            grid[i, :] = row

        logger.debug(f"Read {row_count}x{col_count} grid ending at line {self.line_number}")
        return grid

    def _check_count(self, values, count, kind, line):
        if count is not None and len(values) != count:
            noun = kind if count == 1 else kind + "s"
            raise FormatError(f"expected {count} {noun}, found {len(values)}",
                              self.line_number, line)
