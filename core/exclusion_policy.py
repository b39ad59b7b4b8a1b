"""
Exclusion Policy - Loai file theo extension hoac ten (test/spec files).

Nguon:
- --exclude tokens tu CLI (comma-separated)
- Flags --no-json, --no-markdown, --no-yaml (them nhom extension co san)

Phan loai token:
- Chua `*`, `.test.` hoac `.spec.` -> name pattern
- Con lai -> extension (lowercase, co dau `.` o dau)

Name pattern chi match dua tren marker `.test.` / `.spec.` trong ten file.
Pattern chi co wildcard (vd `*.gen.ts`) duoc luu lai nhung khong match file nao.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

from core.constants import EXCLUDABLE_EXTENSIONS, NAME_PATTERN_MARKERS, WILDCARD_CHAR


@dataclass(frozen=True)
class ExclusionConfig:
    """
    Cau hinh exclusion, build mot lan tu CLI input.

    Attributes:
        extensions: Extensions bi loai (lowercase, vd ".json")
        name_patterns: Cac name pattern theo thu tu user nhap
    """

    extensions: FrozenSet[str] = field(default_factory=frozenset)
    name_patterns: Tuple[str, ...] = ()


def parse_exclude_option(raw: Optional[str]) -> List[str]:
    """
    Tach gia tri --exclude (comma-separated) thanh list tokens.

    Token rong va khoang trang thua bi bo qua.
    """
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def normalize_extension(token: str) -> str:
    """Chuan hoa token thanh extension lowercase co dau `.` o dau."""
    token = token.strip().lower()
    return token if token.startswith(".") else "." + token


def is_name_pattern(token: str) -> bool:
    """Token co duoc xem la name pattern khong (wildcard hoac test/spec marker)."""
    return WILDCARD_CHAR in token or any(marker in token for marker in NAME_PATTERN_MARKERS)


def build_exclusion_config(
    exclude_tokens: Optional[Iterable[str]] = None,
    no_json: bool = False,
    no_markdown: bool = False,
    no_yaml: bool = False,
) -> ExclusionConfig:
    """
    Build ExclusionConfig tu CLI input.

    Args:
        exclude_tokens: Cac token tu --exclude
        no_json: Loai nhom JSON
        no_markdown: Loai nhom Markdown
        no_yaml: Loai nhom YAML

    Returns:
        ExclusionConfig (immutable)
    """
    extensions = set()
    patterns: List[str] = []

    for token in exclude_tokens or []:
        token = token.strip()
        if not token:
            continue
        if is_name_pattern(token):
            patterns.append(token)
        else:
            extensions.add(normalize_extension(token))

    if no_json:
        extensions.update(EXCLUDABLE_EXTENSIONS["json"])
    if no_markdown:
        extensions.update(EXCLUDABLE_EXTENSIONS["markdown"])
    if no_yaml:
        extensions.update(EXCLUDABLE_EXTENSIONS["yaml"])

    return ExclusionConfig(extensions=frozenset(extensions), name_patterns=tuple(patterns))


def matches_name_pattern(config: ExclusionConfig, filename: str) -> bool:
    """
    Kiem tra filename co match name pattern nao khong.

    Mot pattern chua `.test.` match moi file co `.test.` trong ten
    (tuong tu voi `.spec.`).
    """
    for pattern in config.name_patterns:
        for marker in NAME_PATTERN_MARKERS:
            if marker in pattern and marker in filename:
                return True
    return False


def is_excluded(config: ExclusionConfig, filename: str, extension: str) -> bool:
    """
    File co bi loai boi policy khong.

    Args:
        config: ExclusionConfig
        filename: Ten file (scanner truyen vao dang lowercase)
        extension: Extension cua file (vd ".json", "" neu khong co)

    Returns:
        True neu extension nam trong danh sach loai hoac ten file match name pattern
    """
    if extension and extension.lower() in config.extensions:
        return True
    return matches_name_pattern(config, filename)
