"""
Binary Detection - Phat hien file binary dua tren null bytes.

Chi doc toi da BINARY_SNIFF_BYTES (8000) bytes dau file:
- Co null byte trong prefix -> binary
- Khong doc duoc file (permission, special file) -> binary (fail safe, skip file)

Day la heuristic, khong phai content-type detection. Encoding dac biet
(UTF-16, ...) co the bi xem la binary.
"""

import os
import stat
from pathlib import Path
from typing import Union

from core.constants import BINARY_SNIFF_BYTES


def looks_binary(chunk: bytes) -> bool:
    """
    Kiem tra chunk co null byte khong.

    Args:
        chunk: Du lieu bytes can kiem tra

    Returns:
        True neu chunk chua it nhat mot null byte
    """
    return b"\x00" in chunk


def read_prefix(file_path: Union[str, Path], size: int = BINARY_SNIFF_BYTES) -> bytes:
    """Doc toi da `size` bytes dau file."""
    with open(file_path, "rb") as f:
        return f.read(size)


def is_binary_file(file_path: Union[str, Path]) -> bool:
    """
    Kiem tra file co phai binary khong.

    Special files (FIFO, socket, device) khong duoc mo vi co the block;
    chung duoc xem la binary.

    Args:
        file_path: Duong dan file

    Returns:
        True neu file la binary hoac khong doc duoc
    """
    try:
        if not stat.S_ISREG(os.stat(file_path).st_mode):
            return True
        return looks_binary(read_prefix(file_path))
    except OSError:
        return True
