"""
Shared fixtures cho token-count tests.

- WhitespaceTokenizer: tokenizer deterministic (1 token = 1 tu),
  inject qua tokenizer factory seam thay cho tiktoken
- reset_logging (autouse): dam bao moi test bat dau voi logger sach
- make_files: tao file co so token biet truoc
"""

import threading
from pathlib import Path
from typing import Dict, List

import pytest

from core.logging_config import shutdown_logging
from core.tokenization.counter import TokenizerError
from services.interfaces.tokenization_service import ITokenizationService


class WhitespaceTokenizer(ITokenizationService):
    """Dem token = so tu phan cach boi whitespace."""

    # Noi dung chua marker nay -> raise TokenizerError
    FAIL_MARKER = "<<fail-encode>>"

    @property
    def encoding_name(self) -> str:
        return "whitespace"

    def count_tokens(self, text: str) -> int:
        if self.FAIL_MARKER in text:
            raise TokenizerError("marker found")
        return len(text.split())


class RecordingFactory:
    """Factory ghi lai moi tokenizer da tao va thread da tao no."""

    def __init__(self):
        self.created: List[WhitespaceTokenizer] = []
        self.threads: List[str] = []
        self._lock = threading.Lock()

    def __call__(self) -> WhitespaceTokenizer:
        tokenizer = WhitespaceTokenizer()
        with self._lock:
            self.created.append(tokenizer)
            self.threads.append(threading.current_thread().name)
        return tokenizer


def words(count: int) -> str:
    """Text co dung `count` tokens theo WhitespaceTokenizer."""
    return " ".join(f"w{i}" for i in range(count))


@pytest.fixture(autouse=True)
def reset_logging():
    """Shutdown logging listener sau moi test."""
    shutdown_logging()
    yield
    shutdown_logging()


@pytest.fixture
def tokenizer_factory():
    return RecordingFactory()


@pytest.fixture
def make_files(tmp_path: Path):
    """
    Tao files voi so token cho truoc.

    Usage:
        paths = make_files({"a.txt": 10, "sub/b.txt": 25})
    """

    def _make(counts: Dict[str, int]) -> List[str]:
        paths = []
        for name, count in counts.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(words(count), encoding="utf-8")
            paths.append(str(path))
        return paths

    return _make


@pytest.fixture
def fail_worker_start(monkeypatch):
    """
    Gia lap "can't start new thread" cho worker threads cua pool.

    Usage:
        attempts = fail_worker_start(allowed=2)  # worker thu 3 raise
    """

    def _install(allowed: int) -> List[str]:
        real_start = threading.Thread.start
        attempts: List[str] = []

        def start(thread):
            # Chi anh huong token workers, khong anh huong log listener thread
            if thread.name.startswith("token-worker-"):
                attempts.append(thread.name)
                if len(attempts) > allowed:
                    raise RuntimeError("can't start new thread")
            real_start(thread)

        monkeypatch.setattr(threading.Thread, "start", start)
        return attempts

    return _install
