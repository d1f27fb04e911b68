"""
Global constants for the input readers and the package logger.
"""

DEFAULT_ENCODING = "utf-8"

LOGGER_NAME = "swinging_wild"

# Time - Module - Level - Message
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
