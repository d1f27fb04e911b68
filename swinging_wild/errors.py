from typing import Optional


class FormatError(ValueError):
    """
    Raised when an input line does not match the expected grammar.

    Attributes
    ----------
    line_number : int or None
        1-based number of the offending line, when known.
    line : str or None
        Text of the offending line, without its terminator.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line

        if line_number is not None:
            message = f"line {line_number}: {message}"
        if line is not None:
            message = f"{message} (got {line!r})"

        super().__init__(message)
