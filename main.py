"""
token-count - Main CLI Entry Point

Dem token cua LLM trong nhieu files song song.

    token-count [--debug] [--log-file PATH] [--threads N] [-r] <path>...
"""

import argparse
import sys
from typing import List, Optional

from config.paths import APP_NAME, APP_VERSION
from config.run_config import RunConfig
from core.logging_config import LogFileError, setup_logging, shutdown_logging
from core.tokenization.batch import PoolResult, TokenCountPool, TokenizerFactory
from core.utils.file_scanner import discover_files
from services.encoder_registry import get_tokenizer_factory
from services.report_service import ReportService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Counts tokens in files using the tiktoken library.",
    )
    parser.add_argument("paths", nargs="+", metavar="path", help="Files or directories")
    parser.add_argument(
        "--debug", action="store_true", default=False, help="Enable debug mode"
    )
    parser.add_argument(
        "--log-file", type=str, default="", help="Specify the log file"
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=0,
        help="Specify the number of threads to use (default: number of CPUs)",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=False,
        help="Explore directories recursively",
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )
    return parser


def run(
    config: RunConfig, tokenizer_factory: Optional[TokenizerFactory] = None
) -> PoolResult:
    """
    Chay mot batch: discovery -> worker pool -> report.

    Args:
        config: RunConfig da parse
        tokenizer_factory: Override tokenizer (tests), mac dinh tiktoken

    Returns:
        PoolResult sau barrier

    Raises:
        LogFileError: Neu log file khong mo duoc (truoc khi xu ly gi)
    """
    setup_logging(config.log_file, debug=config.debug)
    reporter = ReportService()

    discovery = discover_files(config.paths, recursive=config.recursive)
    reporter.report_discovery(discovery)

    pool = TokenCountPool(
        workers=config.worker_count,
        tokenizer_factory=tokenizer_factory or get_tokenizer_factory(),
        debug=config.debug,
        on_result=reporter.report_file,
    )
    outcome = pool.run(discovery.files)

    reporter.report_total(outcome)
    return outcome


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_namespace(args)

    try:
        run(config)
    except LogFileError as e:
        print(f"Error opening log file: {e}")
        return 1
    finally:
        # Listener phai dung ke ca khi pool raise
        shutdown_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
