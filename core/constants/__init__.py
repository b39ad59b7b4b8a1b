from core.constants.file_patterns import (
    BASE_IGNORE_PATTERNS,
    BINARY_SNIFF_BYTES,
    DEFAULT_ENCODING_NAME,
    EXCLUDABLE_EXTENSIONS,
    NAME_PATTERN_MARKERS,
    NO_EXTENSION_KEY,
    TOP_FILES_LIMIT,
    WILDCARD_CHAR,
)

__all__ = [
    "BASE_IGNORE_PATTERNS",
    "BINARY_SNIFF_BYTES",
    "DEFAULT_ENCODING_NAME",
    "EXCLUDABLE_EXTENSIONS",
    "NAME_PATTERN_MARKERS",
    "NO_EXTENSION_KEY",
    "TOP_FILES_LIMIT",
    "WILDCARD_CHAR",
]
