"""
Swinging Wild input file parser.

Format:
  Line 1: T, the number of test cases
  For each test case:
    N, the number of vines
    N lines: d_i l_i (distance of the vine from the start, vine length)
    D, the target distance
"""
import logging
import numpy

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple, Union

from swinging_wild.config import DEFAULT_ENCODING
from swinging_wild.errors import FormatError
from swinging_wild.readers import LineReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vine:
    distance: int
    length: int


@dataclass(frozen=True)
class TestCase:
    target_distance: int
    vines: Tuple[Vine, ...] = ()

    # keep pytest from collecting this class
    __test__ = False

    def __post_init__(self):
        # always store an immutable sequence, whatever the caller passed
        object.__setattr__(self, "vines", tuple(self.vines))

    def as_array(self) -> numpy.ndarray:
        """
        Return the vines as an (N, 2) int64 matrix of [distance, length] rows.

        Raises OverflowError when a value does not fit in int64.
        """
        mat = numpy.zeros((len(self.vines), 2), dtype=numpy.int64)
        for i, vine in enumerate(self.vines):
            mat[i, 0] = vine.distance
            mat[i, 1] = vine.length
        return mat


class InputFile:
    """
    Parse a Swinging Wild input file into a sequence of TestCase.

    The whole file is parsed in the constructor; on any error no object is
    built and the error propagates to the caller.

    Parameters
    ----------
    file_path : str or Path

    encoding : str
        Text encoding of the input file.

    Raises
    ------
    FormatError
        A line does not hold the expected integers, a count is negative or
        the file ends early.
    OSError
        The file cannot be opened or read.
    """

    def __init__(self, file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING):
        self.path = Path(file_path)

        logger.info(f"Reading input file: {self.path}")
        try:
            with open(self.path, "r", encoding=encoding) as file_handler:
                self._test_cases = self._parse(LineReader(file_handler))
        except (OSError, FormatError) as e:
            logger.error(f"Failed to read '{self.path}': {e}")
            raise

        logger.info(f"Read {len(self._test_cases)} test cases from {self.path}")

    @property
    def test_cases(self) -> Tuple[TestCase, ...]:
        return self._test_cases

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._test_cases)

    def __len__(self) -> int:
        return len(self._test_cases)

    def __repr__(self) -> str:
        return f"InputFile({str(self.path)!r}, test_cases={len(self._test_cases)})"

    @staticmethod
    def _parse(reader: LineReader) -> Tuple[TestCase, ...]:
        test_case_count = _read_count(reader, "test case")

        test_cases = list()
        for i in range(test_case_count):
            vine_count = _read_count(reader, "vine")

            vines = list()
            for _ in range(vine_count):
                distance, length = reader.read_ints(2)
                vines.append(Vine(distance, length))

            target_distance = reader.read_ints(1)[0]

            logger.debug(f"Case #{i + 1}: {vine_count} vines, D = {target_distance}")
            test_cases.append(TestCase(target_distance, tuple(vines)))

        return tuple(test_cases)


def _read_count(reader: LineReader, what: str) -> int:
    count = reader.read_ints(1)[0]
    if count < 0:
        raise FormatError(f"negative {what} count {count}", reader.line_number)
    return count


def read_input_file(file_path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> Tuple[TestCase, ...]:
    """Parse file_path and return its test cases in input order."""
    return InputFile(file_path, encoding=encoding).test_cases
