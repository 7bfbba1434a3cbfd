"""
Core Utilities Package

Chua cac utility modules:
- file_scanner: Expand path arguments thanh flat file list
- number_format: Format so voi thousands separators
"""

# Re-export commonly used items for convenience
from core.utils.file_scanner import (
    DiscoveryError,
    DiscoveryResult,
    FileScanner,
    discover_files,
)

from core.utils.number_format import format_number

__all__ = [
    # file_scanner
    "DiscoveryError",
    "DiscoveryResult",
    "FileScanner",
    "discover_files",
    # number_format
    "format_number",
]
