"""
TokenizationService - Concrete implementation cua ITokenizationService.

Encoder (tiktoken) duoc quan ly o instance level va inject vao scanner,
khong dung global state.

Fallback Strategy:
  Khi encoding khong load duoc (offline, loi network), service se:
  1. Fallback ve estimate_tokens() de scan khong bi gian doan
  2. Emit warning log mot lan va danh dau is_estimated de report ghi chu

Loi doc mot file (RecoverableFileReadError) hoac loi encode duoc log
"Error reading <path>: <message>" va file do tinh 0 tokens.
"""

from pathlib import Path
from typing import Optional

import tiktoken

from core.constants import DEFAULT_ENCODING_NAME
from core.encoders import estimate_tokens, load_encoding
from core.exceptions import RecoverableFileReadError
from core.logging_config import log_error, log_warning
from services.interfaces.tokenization_service import ITokenizationService


class TokenizationService(ITokenizationService):
    """
    Dich vu dem token bang tiktoken.

    Encoding duoc lazy-load o lan dem dau tien.
    """

    def __init__(self, encoding_name: str = DEFAULT_ENCODING_NAME) -> None:
        """
        Khoi tao TokenizationService.

        Args:
            encoding_name: Ten tiktoken encoding (mac dinh: "o200k_base")
        """
        self._encoding_name = encoding_name
        self._encoder: Optional[tiktoken.Encoding] = None
        self._load_attempted = False
        # Flag theo doi trang thai fallback
        self._using_estimation = False

    @property
    def encoding_label(self) -> str:
        return f"{self._encoding_name} tokenizer"

    @property
    def is_estimated(self) -> bool:
        return self._using_estimation

    # ================================================================
    # Public API - ITokenizationService contract
    # ================================================================

    def count_tokens(self, text: str) -> int:
        """
        Dem so token trong text.

        Special tokens (vd `<|endoftext|>`) duoc dem nhu text thuong.

        Args:
            text: Doan text can dem token

        Returns:
            So luong tokens
        """
        if not text:
            return 0

        encoder = self._get_or_create_encoder()

        if encoder is None:
            if not self._using_estimation:
                log_warning(
                    f"[TokenizationService] Encoding {self._encoding_name} khong kha dung, "
                    "dang su dung uoc luong (~4 ky tu/token). "
                    "Ket qua co the sai lech so voi thuc te."
                )
                self._using_estimation = True
            return estimate_tokens(text)

        return len(encoder.encode(text, disallowed_special=()))

    def count_tokens_for_file(self, file_path: Path) -> int:
        """
        Doc file va dem token. Khong bao gio raise.

        Args:
            file_path: Duong dan den file

        Returns:
            So luong tokens, hoac 0 neu doc/dem that bai
        """
        try:
            content = self._read_file(file_path)
            return self.count_tokens(content)
        except RecoverableFileReadError as e:
            log_error(str(e))
        except Exception as e:
            log_error(str(RecoverableFileReadError(str(file_path), str(e))))
        return 0

    # ================================================================
    # Internal / Private methods
    # ================================================================

    def _get_or_create_encoder(self) -> Optional[tiktoken.Encoding]:
        """Lazy-load encoding, chi thu mot lan."""
        if self._encoder is None and not self._load_attempted:
            self._load_attempted = True
            self._encoder = load_encoding(self._encoding_name)
        return self._encoder

    @staticmethod
    def _read_file(file_path: Path) -> str:
        """
        Doc noi dung file dang UTF-8 (bytes loi duoc thay bang U+FFFD).

        Raises:
            RecoverableFileReadError: Neu khong doc duoc file
        """
        try:
            return Path(file_path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise RecoverableFileReadError(str(file_path), e.strerror or str(e)) from e
