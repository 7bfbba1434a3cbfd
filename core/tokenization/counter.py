"""
Core per-file token counting logic.

Functions:
- read_file_content(): Doc file bytes va decode UTF-8 (replace loi)
- count_tokens_for_file(): Doc + (debug log) + tokenize mot file -> FileResult

Moi loi (doc file, tokenizer) duoc bat TAI DAY va tra ve FileResult
co error, de worker co the tiep tuc voi file ke tiep.

DIP: Module nay KHONG import tu services layer o runtime.
Tokenizer duoc inject qua parameters.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from core.logging_config import log_error, log_info

if TYPE_CHECKING:
    from services.interfaces.tokenization_service import ITokenizationService


class TokenizerError(RuntimeError):
    """Encoding khong load duoc hoac encode that bai."""


@dataclass(frozen=True)
class FileResult:
    """
    Ket qua xu ly mot file.

    Attributes:
        path: File path (Job)
        token_count: So token, 0 neu loi
        error: Mo ta loi, None neu thanh cong
    """

    path: str
    token_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_file_content(path: str) -> str:
    """
    Doc toan bo file va decode UTF-8.

    Byte sequences khong hop le duoc thay bang U+FFFD thay vi raise.

    Raises:
        OSError: Neu file khong doc duoc (permission, file bien mat, ...)
    """
    with open(path, "rb") as f:
        content_bytes = f.read()
    return content_bytes.decode("utf-8", errors="replace")


def count_tokens_for_file(
    path: str,
    tokenizer: "ITokenizationService",
    debug: bool = False,
) -> FileResult:
    """
    Dem token cho mot file.

    Args:
        path: Duong dan file
        tokenizer: Handle tokenizer cua worker hien tai
        debug: Log toan bo noi dung file truoc khi tokenize

    Returns:
        FileResult (error != None neu doc file hoac tokenize that bai)
    """
    try:
        content = read_file_content(path)
    except OSError as e:
        log_error(f"Error reading file {path}", e)
        return FileResult(path=path, error=str(e))

    if debug:
        log_info(f"File: {path}, Content: {content}")

    try:
        token_count = tokenizer.count_tokens(content)
    except TokenizerError as e:
        log_error(f"Error encoding file {path}", e)
        return FileResult(path=path, error=str(e))

    return FileResult(path=path, token_count=token_count)
