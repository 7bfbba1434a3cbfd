"""
Encoder Registry - Provider cho TokenizationService instances.

TokenCountPool nhan mot TokenizerFactory va goi no MOT LAN cho moi worker,
nen moi worker co handle tokenizer rieng. Tests inject factory khac
(vd: whitespace tokenizer) qua cung seam nay.

Functions:
- create_tokenization_service(): Tao TokenizationService moi
- get_tokenizer_factory(): Factory mac dinh cho encoding co dinh
"""

from config.paths import TOKEN_ENCODING
from core.tokenization.batch import TokenizerFactory
from services.interfaces.tokenization_service import ITokenizationService
from services.tokenization_service import TokenizationService


def create_tokenization_service(
    encoding_name: str = TOKEN_ENCODING,
) -> ITokenizationService:
    """
    Tao TokenizationService instance moi (khong singleton).

    Args:
        encoding_name: Ten tiktoken encoding

    Returns:
        ITokenizationService instance
    """
    return TokenizationService(encoding_name=encoding_name)


def get_tokenizer_factory(encoding_name: str = TOKEN_ENCODING) -> TokenizerFactory:
    """
    Lay factory tao tokenizer handle cho moi worker.

    Args:
        encoding_name: Ten tiktoken encoding

    Returns:
        Callable tra ve ITokenizationService moi moi lan goi
    """

    def factory() -> ITokenizationService:
        return create_tokenization_service(encoding_name)

    return factory
