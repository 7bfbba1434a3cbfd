"""
RunConfig - Cau hinh bat bien cho mot lan chay token-count.

Thay the cac global flag variables bang mot frozen dataclass,
tao MOT LAN tu parsed CLI args roi truyen vao TokenCountPool.
Workers khong bao gio doc cau hinh tu global state.

Su dung:
    config = RunConfig.from_namespace(args)
    pool = TokenCountPool(config.worker_count, debug=config.debug, ...)
"""

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Tuple


def resolve_worker_count(threads: int) -> int:
    """
    Tinh so worker threads thuc te.

    Args:
        threads: Gia tri --threads (<= 0 nghia la auto-detect)

    Returns:
        threads neu > 0, nguoc lai so CPU cores (toi thieu 1)
    """
    if threads > 0:
        return threads
    return os.cpu_count() or 1


@dataclass(frozen=True)
class RunConfig:
    """
    Typed, immutable run configuration.

    Attributes:
        paths: Cac path arguments theo thu tu tren command line
        debug: Log toan bo noi dung file truoc khi tokenize
        log_file: Duong dan log file, None = stdout
        threads: So threads user yeu cau (0 = auto)
        recursive: Duyet directories de quy
    """

    paths: Tuple[str, ...]
    debug: bool = False
    log_file: Optional[str] = None
    threads: int = 0
    recursive: bool = False

    @property
    def worker_count(self) -> int:
        """So worker threads se duoc start."""
        return resolve_worker_count(self.threads)

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "RunConfig":
        """
        Tao RunConfig tu argparse Namespace.

        Empty string cho --log-file duoc xem nhu khong co log file.

        Args:
            args: Ket qua cua ArgumentParser.parse_args()

        Returns:
            RunConfig instance
        """
        return cls(
            paths=tuple(args.paths),
            debug=bool(args.debug),
            log_file=args.log_file or None,
            threads=int(args.threads),
            recursive=bool(args.recursive),
        )
