"""
Core Utilities Package

Chua cac utility modules:
- file_scanner: Duyet cay thu muc va dem token
- format_utils: Format so, bytes, chi phi cho report
"""

# Re-export commonly used items for convenience
from core.utils.file_scanner import (
    FileScanner,
    scan_directory,
    validate_root,
)

from core.utils.format_utils import (
    format_number,
    format_bytes,
    format_cost,
)

__all__ = [
    "FileScanner",
    "scan_directory",
    "validate_root",
    "format_number",
    "format_bytes",
    "format_cost",
]
