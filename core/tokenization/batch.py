"""
Batch/parallel token counting voi fixed-size worker pool.

Flow (W = min(workers, N)):
    IDLE -> POPULATING (queue day du N paths + W close sentinels)
         -> DRAINING (W worker threads pull tu queue)
         -> DONE (coordinator join() moi worker = barrier)

AN TOAN RACE CONDITION:
- Job queue duoc populate TRUOC khi start workers, sau do chi doc
- Moi worker ghi ket qua vao list RIENG (khong lock)
- Total duoc tinh MOT LAN sau barrier tu cac list do
- Output di qua logging queue (single writer thread), xem core.logging_config

DIP: Module nay KHONG import tu services layer.
Tokenizer factory duoc inject qua constructor.
"""

import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, TYPE_CHECKING

from config.run_config import resolve_worker_count
from core.logging_config import log_debug, log_error
from core.tokenization.counter import FileResult, TokenizerError, count_tokens_for_file

if TYPE_CHECKING:
    from services.interfaces.tokenization_service import ITokenizationService

# Factory khong tham so, tra ve handle tokenizer moi
TokenizerFactory = Callable[[], "ITokenizationService"]
ResultCallback = Callable[[FileResult], None]

# Sentinel dong queue - moi worker nhan dung mot cai roi thoat
_CLOSE = object()


class PoolState(Enum):
    """Trang thai cua pool, chi di mot chieu."""

    IDLE = "idle"
    POPULATING = "populating"
    DRAINING = "draining"
    DONE = "done"


@dataclass(frozen=True)
class PoolResult:
    """
    Ket qua tong hop sau barrier.

    Attributes:
        results: Moi FileResult (thu tu khong xac dinh giua workers)
    """

    results: Tuple[FileResult, ...] = ()

    @property
    def total_tokens(self) -> int:
        """Tong token cua cac file thanh cong."""
        return sum(r.token_count for r in self.results if r.ok)

    @property
    def files_processed(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def files_failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)


class _UnavailableTokenizer:
    """Stand-in khi factory raise: moi file cua worker do deu loi encoding."""

    def __init__(self, reason: str):
        self._reason = reason

    def count_tokens(self, text: str) -> int:
        raise TokenizerError(self._reason)


class TokenCountPool:
    """
    Fixed-size pool cac OS threads dem token cho mot batch files.

    Khong ho tro cancellation, retry hay priority. Moi pool chi run() MOT LAN.

    Usage:
        pool = TokenCountPool(
            workers=4,
            tokenizer_factory=get_tokenizer_factory(),
            on_result=reporter.report_file,
        )
        outcome = pool.run(discovery.files)
        print(outcome.total_tokens)
    """

    def __init__(
        self,
        workers: int,
        tokenizer_factory: TokenizerFactory,
        debug: bool = False,
        on_result: Optional[ResultCallback] = None,
    ):
        """
        Args:
            workers: So worker threads (<= 0 = so CPU cores)
            tokenizer_factory: Goi MOT LAN moi worker de lay tokenizer rieng
            debug: Log noi dung file truoc khi tokenize
            on_result: Callback goi tu worker thread cho moi file thanh cong
        """
        self.workers = resolve_worker_count(workers)
        self.debug = debug
        self._tokenizer_factory = tokenizer_factory
        self._on_result = on_result
        self._state = PoolState.IDLE
        self._state_lock = threading.Lock()

    @property
    def state(self) -> PoolState:
        with self._state_lock:
            return self._state

    def _advance(self, expected: PoolState, new_state: PoolState) -> None:
        """Chuyen state, raise neu state hien tai khong phai expected."""
        with self._state_lock:
            if self._state is not expected:
                raise RuntimeError(
                    f"TokenCountPool cannot move from {self._state.value} "
                    f"to {new_state.value}"
                )
            self._state = new_state

    def run(self, file_paths: Sequence[str]) -> PoolResult:
        """
        Xu ly toan bo batch va cho moi worker ket thuc.

        Args:
            file_paths: Danh sach files da discover (co the rong)

        Returns:
            PoolResult chua moi FileResult

        Raises:
            RuntimeError: Neu pool da run() truoc do
        """
        self._advance(PoolState.IDLE, PoolState.POPULATING)

        # Khong start nhieu worker hon so file (N = 0 -> khong worker nao)
        spawn_count = min(self.workers, len(file_paths))

        job_queue: "queue.Queue[object]" = queue.Queue()
        for path in file_paths:
            job_queue.put(path)
        # Dong queue: khong co insert nao sau day
        for _ in range(spawn_count):
            job_queue.put(_CLOSE)

        self._advance(PoolState.POPULATING, PoolState.DRAINING)
        log_debug(
            f"[TokenCountPool] Processing {len(file_paths)} files "
            f"with {spawn_count} workers"
        )

        buckets: List[List[FileResult]] = []
        started: List[threading.Thread] = []
        try:
            self._start_workers(job_queue, spawn_count, buckets, started)
        finally:
            # Barrier: join moi thread DA start, ke ca khi start loi
            for thread in started:
                thread.join()
            self._advance(PoolState.DRAINING, PoolState.DONE)

        return PoolResult(results=tuple(r for bucket in buckets for r in bucket))

    def _start_workers(
        self,
        job_queue: "queue.Queue[object]",
        count: int,
        buckets: List[List[FileResult]],
        started: List[threading.Thread],
    ) -> None:
        """
        Start toi da `count` worker threads.

        Paths nam truoc moi close sentinel trong queue, nen chi can MOT
        worker chay la toan bo batch van duoc xu ly. Sentinel thua
        cua worker khong start duoc van nam lai trong queue.

        Raises:
            RuntimeError: Neu khong start duoc worker nao
        """
        for i in range(count):
            bucket: List[FileResult] = []
            thread = threading.Thread(
                target=self._worker_loop,
                args=(job_queue, bucket),
                name=f"token-worker-{i}",
            )
            try:
                thread.start()
            except RuntimeError as e:
                if not started:
                    raise
                log_error(
                    f"[TokenCountPool] Cannot start worker {i}, "
                    f"continuing with {len(started)} workers",
                    e,
                )
                return
            buckets.append(bucket)
            started.append(thread)

    def _worker_loop(
        self, job_queue: "queue.Queue[object]", results: List[FileResult]
    ) -> None:
        """
        Worker: pull path -> xu ly -> lap lai cho den khi gap close sentinel.

        Loi cua mot file KHONG lam worker dung lai.
        """
        tokenizer = self._create_tokenizer()

        while True:
            item = job_queue.get()
            if item is _CLOSE:
                return

            path = str(item)
            try:
                result = count_tokens_for_file(path, tokenizer, debug=self.debug)
            except Exception as e:
                log_error(f"Error processing file {path}", e)
                result = FileResult(path=path, error=str(e))

            results.append(result)

            if result.ok and self._on_result is not None:
                try:
                    self._on_result(result)
                except Exception as e:
                    log_error(f"Error reporting file {path}", e)

    def _create_tokenizer(self):
        """Lay tokenizer handle rieng cho worker hien tai."""
        try:
            return self._tokenizer_factory()
        except Exception as e:
            log_error("[TokenCountPool] Cannot create tokenizer", e)
            return _UnavailableTokenizer(f"tokenizer unavailable: {e}")
