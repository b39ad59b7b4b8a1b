"""Fixtures dung chung: stub token counter va helper tao cay thu muc."""

from pathlib import Path
from typing import Dict, List, Optional

import pytest

from services.interfaces.tokenization_service import ITokenizationService


class StubTokenCounter(ITokenizationService):
    """
    Token counter co dinh cho tests.

    Token = so tu (tach theo whitespace), tru khi filename co trong `overrides`.
    Ghi lai moi path da duoc dem vao `calls`.
    """

    def __init__(self, overrides: Optional[Dict[str, int]] = None):
        self.overrides = overrides or {}
        self.calls: List[str] = []

    def count_tokens(self, text: str) -> int:
        return len(text.split())

    def count_tokens_for_file(self, file_path: Path) -> int:
        self.calls.append(Path(file_path).as_posix())
        if file_path.name in self.overrides:
            return self.overrides[file_path.name]
        return self.count_tokens(file_path.read_text(encoding="utf-8", errors="replace"))

    @property
    def encoding_label(self) -> str:
        return "stub tokenizer"


def words(n: int) -> str:
    """Text co dung n tu."""
    return " ".join(f"w{i}" for i in range(n))


def write_file(root: Path, rel_path: str, content="") -> Path:
    """Tao file (va cac folder cha) trong root."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def stub_counter() -> StubTokenCounter:
    return StubTokenCounter()


@pytest.fixture(autouse=True)
def _reset_logger():
    """Reset logger singleton de handler khong giu stderr da dong cua CliRunner."""
    import logging

    import core.logging_config as logging_config
    from config.paths import APP_NAME

    def reset():
        logging_config._logger = None
        logger = logging.getLogger(APP_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    reset()
    yield
    reset()
