"""
Encoders - Load tiktoken encoding cho token counting.

Functions:
- load_encoding(): Load tiktoken encoding theo ten, None neu khong kha dung
- estimate_tokens(): Uoc luong tokens khi encoder khong kha dung

Encoding duoc TokenizationService giu o instance level, khong co singleton
o module level.
"""

from typing import Optional

import tiktoken

from core.logging_config import log_debug, log_error


def load_encoding(encoding_name: str) -> Optional[tiktoken.Encoding]:
    """
    Load tiktoken encoding.

    tiktoken tai BPE file o lan dau su dung; neu offline va chua co cache
    thi load se that bai.

    Args:
        encoding_name: Ten encoding (vd: "o200k_base")

    Returns:
        tiktoken.Encoding hoac None neu load that bai
    """
    try:
        encoding = tiktoken.get_encoding(encoding_name)
    except Exception as e:
        log_error(f"[Encoders] Failed to load tiktoken encoding {encoding_name}", e)
        return None

    log_debug(f"[Encoders] Using tiktoken {encoding_name}")
    return encoding


def estimate_tokens(text: str) -> int:
    """
    Uoc luong so token khi encoder khong kha dung.

    Quy tac: ~4 ky tu = 1 token (heuristic pho bien).
    Day la uoc luong, khong chinh xac 100%.

    Args:
        text: Text can uoc luong

    Returns:
        So token uoc luong
    """
    if not text:
        return 0
    return max(1, len(text) // 4)
