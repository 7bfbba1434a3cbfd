"""
ReportService - Ghi ket qua ra output sink.

- report_discovery(): Log loi discovery va directories bi skip
- report_file(): Log "File: <path> (<N> tks)" (goi tu worker threads)
- report_total(): Drain log sink, roi in total ra STDOUT

Final total luon ra stdout, ke ca khi co --log-file.
"""

import sys
from typing import Optional, TextIO

from core.logging_config import log_error, log_info, log_result, shutdown_logging
from core.tokenization.batch import PoolResult
from core.tokenization.counter import FileResult
from core.utils.file_scanner import DiscoveryResult
from core.utils.number_format import format_number

TOTAL_SEPARATOR = "__"


def format_file_line(result: FileResult) -> str:
    """Dong output canonical cho mot file thanh cong."""
    return f"File: {result.path} ({result.token_count} tks)"


def format_total_line(total: int) -> str:
    """Dong total cuoi cung, da format thousands separators."""
    return f"Total token count: {format_number(total)} tks"


class ReportService:
    """Reporter cho mot lan chay token-count."""

    def __init__(self, stdout: Optional[TextIO] = None):
        """
        Args:
            stdout: Stream cho final total (mac dinh sys.stdout luc goi)
        """
        self._stdout = stdout

    def report_discovery(self, discovery: DiscoveryResult) -> None:
        for error in discovery.errors:
            log_error(error.describe())
        for directory in discovery.skipped_dirs:
            log_info(f"Skipping directory {directory} (use --recursive to process)")

    def report_file(self, result: FileResult) -> None:
        # Mot record = mot dong, writer thread ghi nguyen dong
        log_result(format_file_line(result))

    def report_total(self, outcome: PoolResult) -> None:
        """
        In separator + total.

        shutdown_logging() duoc goi truoc de moi per-file line
        da nam trong sink truoc dong total.
        """
        shutdown_logging()

        out = self._stdout if self._stdout is not None else sys.stdout
        out.write(f"{TOTAL_SEPARATOR}\n")
        out.write(format_total_line(outcome.total_tokens) + "\n")
        out.flush()
