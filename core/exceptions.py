"""
Exceptions - Cac loai loi cua codemass.

Phan loai:
- FatalScanError: Khong liet ke duoc thu muc -> dung toan bo scan
- RecoverableFileReadError: Khong doc duoc 1 file -> file do tinh 0 tokens
- ConfigurationError / UnknownModelError: Cau hinh sai (model id, pricing file)
- InvalidPathError: Root path khong ton tai
"""

from typing import Dict, Iterable, Optional


class CodemassError(Exception):
    """Base exception cho tat ca loi cua codemass."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class FatalScanError(CodemassError):
    """Permission denied khi liet ke mot thu muc trong luc scan."""

    def __init__(self, relative_path: str):
        self.relative_path = relative_path
        super().__init__(f"Permission denied accessing {relative_path}")


class RecoverableFileReadError(CodemassError):
    """Doc noi dung mot file that bai. File do se duoc tinh 0 tokens."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading {path}: {reason}")


class ConfigurationError(CodemassError):
    """Cau hinh khong hop le (pricing file, model id, ...)."""


class UnknownModelError(ConfigurationError):
    """Model id khong co trong bang gia."""

    def __init__(self, model_id: str, available: Iterable[str]):
        self.model_id = model_id
        self.available = list(available)
        super().__init__(
            f"Unknown model: {model_id}. "
            f"Available models: {', '.join(self.available)}"
        )


class InvalidPathError(CodemassError):
    """Root path khong ton tai hoac khong phai thu muc."""

    def __init__(self, path: str, reason: str = "does not exist"):
        self.path = path
        self.reason = reason
        super().__init__(f'Path "{path}" {reason}')
