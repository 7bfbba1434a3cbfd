"""
ITokenizationService - Interface cho dich vu dem token.

Dinh nghia contract ma bat ky tokenizer nao cung phai tuan theo.
Cho phep dependency injection va testability (mock/stub):
TokenCountPool chi biet interface nay, khong biet tiktoken.

Methods:
- count_tokens(): Dem token trong text
- encoding_name: Ten encoding dang dung
"""

from abc import ABC, abstractmethod


class ITokenizationService(ABC):
    """
    Interface cho dich vu tokenization.

    Moi implementation phai dam bao:
    - Deterministic: cung text + cung encoding -> cung so token
    - Bao loi bang TokenizerError, KHONG fallback ve uoc luong
      (file loi phai bi loai khoi total)
    """

    @property
    @abstractmethod
    def encoding_name(self) -> str:
        """Ten encoding (vd: "cl100k_base")."""
        ...

    @abstractmethod
    def count_tokens(self, text: str) -> int:
        """
        Dem so token trong mot doan text.

        Args:
            text: Doan text can dem token

        Returns:
            So luong tokens

        Raises:
            TokenizerError: Neu encoding khong load duoc hoac encode that bai
        """
        ...
