"""
Type definitions cho scan pipeline.

- FileRecord: Ket qua cho moi file duoc dem token
- ScanStats: Thong ke cua mot lan scan (dung cho debug log)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileRecord:
    """
    Mot file da duoc dem token.

    Attributes:
        relative_path: Path tuong doi voi scan root, separator `/`
        token_count: So token (luon > 0 trong ket qua scan)
        size_bytes: Kich thuoc file (bytes)
    """

    relative_path: str
    token_count: int
    size_bytes: int


@dataclass
class ScanStats:
    """
    Thong ke cua mot lan scan.

    Attributes:
        directories: So folders da liet ke
        ignored: So entries bi ignore rules loai (folder tinh 1 cho ca subtree)
        excluded: So files bi exclusion policy loai
        binary: So files binary bi bo qua
        empty: So files dem ra 0 tokens (rong hoac loi doc)
        included: So files co trong ket qua
    """

    directories: int = 0
    ignored: int = 0
    excluded: int = 0
    binary: int = 0
    empty: int = 0
    included: int = 0
