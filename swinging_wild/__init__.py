from swinging_wild.errors import FormatError
from swinging_wild.input_file import InputFile, TestCase, Vine, read_input_file
from swinging_wild.readers import LineReader
from swinging_wild.logging_config import setup_logging
