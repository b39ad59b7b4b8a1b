"""
Aggregator - Tong hop ket qua scan thanh Summary.

- Tong files / tokens / bytes, trung binh tokens moi file
- Xep hang files theo token giam dan (stable sort: file bang token giu thu tu scan)
- Nhom theo extension (file khong co extension -> "no-ext")
"""

import math
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from core.constants import NO_EXTENSION_KEY, TOP_FILES_LIMIT
from core.types import FileRecord


@dataclass
class ExtensionBucket:
    """Thong ke cho mot extension."""

    extension: str
    file_count: int = 0
    token_sum: int = 0


@dataclass
class Summary:
    """
    Ket qua tong hop cua mot lan scan.

    Attributes:
        total_files: So files co trong ket qua
        total_tokens: Tong so token
        total_bytes: Tong kich thuoc (bytes)
        average_tokens_per_file: round(total_tokens / total_files), None neu khong co file
        ranked_files: Files sap xep theo token giam dan
        by_extension: extension -> ExtensionBucket, sap xep theo token_sum giam dan
    """

    total_files: int = 0
    total_tokens: int = 0
    total_bytes: int = 0
    average_tokens_per_file: Optional[int] = None
    ranked_files: List[FileRecord] = field(default_factory=list)
    by_extension: Dict[str, ExtensionBucket] = field(default_factory=dict)


def extension_key(relative_path: str) -> str:
    """Extension lowercase cua path, hoac NO_EXTENSION_KEY."""
    name = relative_path.rsplit("/", 1)[-1]
    ext = os.path.splitext(name)[1].lower()
    return ext or NO_EXTENSION_KEY


def round_half_up(value: float) -> int:
    """Lam tron 0.5 len tren (round() cua Python lam tron ve so chan)."""
    return int(math.floor(value + 0.5))


def summarize(records: Sequence[FileRecord]) -> Summary:
    """
    Tong hop danh sach FileRecord.

    Args:
        records: Ket qua scan

    Returns:
        Summary
    """
    total_files = len(records)
    total_tokens = sum(r.token_count for r in records)
    total_bytes = sum(r.size_bytes for r in records)

    average = None
    if total_files > 0:
        average = round_half_up(total_tokens / total_files)

    # sorted() la stable nen file bang token giu nguyen thu tu scan
    ranked = sorted(records, key=lambda r: -r.token_count)

    buckets: Dict[str, ExtensionBucket] = {}
    for record in records:
        key = extension_key(record.relative_path)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = ExtensionBucket(extension=key)
        bucket.file_count += 1
        bucket.token_sum += record.token_count

    ordered = sorted(buckets.values(), key=lambda b: -b.token_sum)

    return Summary(
        total_files=total_files,
        total_tokens=total_tokens,
        total_bytes=total_bytes,
        average_tokens_per_file=average,
        ranked_files=ranked,
        by_extension={b.extension: b for b in ordered},
    )


def extension_percentage(bucket: ExtensionBucket, total_tokens: int) -> Optional[float]:
    """Phan tram token cua bucket, None neu total_tokens = 0."""
    if total_tokens <= 0:
        return None
    return bucket.token_sum / total_tokens * 100


def top_files(summary: Summary, limit: int = TOP_FILES_LIMIT) -> List[FileRecord]:
    """N files nhieu token nhat (toan bo neu it hon N)."""
    return summary.ranked_files[:limit]
