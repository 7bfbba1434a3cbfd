"""
TokenizationService - Concrete implementation cua ITokenizationService.

Boc tiktoken encoding trong instance scope. Moi worker thread tao MOT
instance rieng qua encoder_registry.create_tokenization_service(), nen
khong co trang thai tokenizer nao duoc chia se giua cac workers.

Error Strategy:
  Khong fallback ve uoc luong: loi encoding
  duoc raise thanh TokenizerError. Worker log loi cho file do va
  file bi loai khoi total.
"""

import threading
from typing import Optional

import tiktoken

from config.paths import TOKEN_ENCODING
from core.logging_config import log_debug
from core.tokenization.counter import TokenizerError
from services.interfaces.tokenization_service import ITokenizationService


class TokenizationService(ITokenizationService):
    """
    Dich vu dem token dung tiktoken.

    Encoder duoc lazy-load o lan count_tokens() dau tien, de loi
    khoi tao encoding duoc bao cao theo tung file nhu loi encode.
    """

    def __init__(self, encoding_name: str = TOKEN_ENCODING) -> None:
        """
        Khoi tao TokenizationService.

        Args:
            encoding_name: Ten tiktoken encoding (mac dinh cl100k_base)
        """
        self._encoding_name = encoding_name
        self._encoder: Optional[tiktoken.Encoding] = None
        self._lock = threading.Lock()

    @property
    def encoding_name(self) -> str:
        return self._encoding_name

    def count_tokens(self, text: str) -> int:
        """
        Dem so token trong text.

        Special tokens (vd: "<|endoftext|>") duoc encode nhu text thuong,
        khong raise.

        Args:
            text: Doan text can dem token

        Returns:
            So luong tokens

        Raises:
            TokenizerError: Neu encoding khong load duoc hoac encode that bai
        """
        if not text:
            return 0

        encoder = self._get_or_create_encoder()
        try:
            return len(encoder.encode(text, disallowed_special=()))
        except Exception as e:
            raise TokenizerError(f"encode failed: {e}") from e

    def _get_or_create_encoder(self) -> tiktoken.Encoding:
        """
        Lay encoder, khoi tao neu chua co (thread-safe).

        Raises:
            TokenizerError: Neu tiktoken khong load duoc encoding
        """
        # Fast path: encoder da khoi tao
        if self._encoder is not None:
            return self._encoder

        with self._lock:
            if self._encoder is None:
                try:
                    self._encoder = tiktoken.get_encoding(self._encoding_name)
                except Exception as e:
                    raise TokenizerError(
                        f"cannot load encoding {self._encoding_name}: {e}"
                    ) from e
                log_debug(f"[TokenizationService] Using tiktoken {self._encoding_name}")
            return self._encoder
