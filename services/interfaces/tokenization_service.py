"""
ITokenizationService - Interface cho dich vu dem token.

Dinh nghia contract ma scanner dung de dem token.
Cho phep dependency injection va testability (stub dem token co dinh).

Methods:
- count_tokens(): Dem token trong text
- count_tokens_for_file(): Doc file va dem token, khong bao gio raise
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ITokenizationService(ABC):
    """
    Interface cho dich vu tokenization.

    Moi implementation phai dam bao:
    - count_tokens_for_file() khong raise exception ra ngoai
    - Loi doc/encode duoc log (path + message) va tra ve 0
    """

    @abstractmethod
    def count_tokens(self, text: str) -> int:
        """
        Dem so token trong mot doan text.

        Args:
            text: Doan text can dem token

        Returns:
            So luong tokens
        """
        ...

    @abstractmethod
    def count_tokens_for_file(self, file_path: Path) -> int:
        """
        Doc file (UTF-8) va dem so token.

        Args:
            file_path: Duong dan den file

        Returns:
            So luong tokens, hoac 0 neu doc/dem that bai
        """
        ...

    @property
    def encoding_label(self) -> str:
        """Ten tokenizer hien thi trong report."""
        return "custom tokenizer"

    @property
    def is_estimated(self) -> bool:
        """True neu so token la uoc luong (encoder khong kha dung)."""
        return False
