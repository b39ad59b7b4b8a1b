"""
File Scanner - Duyet cay thu muc va dem token cho tung file.

Pipeline cho moi entry:
1. Ignore rules (base + .gitignore) -> folder bi ignore thi bo ca subtree
2. Folder -> de quy voi cung rule set va exclusion config
3. File -> exclusion policy -> binary check -> dem token -> giu lai neu tokens > 0

Scan chay tuan tu (single-threaded), depth-first. Permission denied khi liet ke
folder la loi fatal: ket qua mot phan se lam sai tong token.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from core.binary_detection import is_binary_file
from core.exceptions import FatalScanError, InvalidPathError
from core.exclusion_policy import ExclusionConfig, is_excluded
from core.ignore_engine import IgnoreRuleSet, build_pathspec, is_ignored
from core.logging_config import log_debug
from core.types import FileRecord, ScanStats
from services.interfaces.tokenization_service import ITokenizationService


def validate_root(root_path: Union[str, Path]) -> Path:
    """
    Kiem tra scan root truoc khi duyet.

    Raises:
        InvalidPathError: Path khong ton tai hoac khong phai folder
    """
    path = Path(root_path)
    if not path.exists():
        raise InvalidPathError(str(root_path))
    if not path.is_dir():
        raise InvalidPathError(str(root_path), "is not a directory")
    return path


def to_relative_path(entry_path: str, root_path: str) -> str:
    """Path tuong doi voi root, luon dung separator `/`."""
    return Path(os.path.relpath(entry_path, root_path)).as_posix()


class FileScanner:
    """
    Scanner de quy, tra ve danh sach FileRecord.

    Rule set va exclusion config la read-only, dung chung cho moi lan de quy.
    Token counter duoc inject tu ngoai (TokenizationService hoac stub).
    """

    def __init__(
        self,
        token_counter: ITokenizationService,
        rule_set: Optional[IgnoreRuleSet] = None,
        exclusion: Optional[ExclusionConfig] = None,
    ):
        self._token_counter = token_counter
        self._rule_set = rule_set
        self._active_rules: Optional[IgnoreRuleSet] = rule_set
        self._exclusion = exclusion if exclusion is not None else ExclusionConfig()
        self.last_stats = ScanStats()

    def scan(self, root_path: Union[str, Path]) -> List[FileRecord]:
        """
        Scan toan bo cay thu muc tu root_path.

        Args:
            root_path: Folder goc

        Returns:
            List FileRecord theo thu tu scan (folders truoc, roi files, theo ten)

        Raises:
            InvalidPathError: Root khong ton tai
            FatalScanError: Permission denied khi liet ke mot folder
        """
        root = validate_root(root_path)

        # Rule set truyen vao dung cho moi root, neu khong build rieng cho root nay
        if self._rule_set is None:
            self._active_rules = build_pathspec(root)
        else:
            self._active_rules = self._rule_set

        self.last_stats = ScanStats()
        records = self._scan_directory(str(root), str(root))

        stats = self.last_stats
        log_debug(
            f"[FileScanner] {root}: {stats.directories} dirs, "
            f"{stats.included} included, {stats.ignored} ignored, "
            f"{stats.excluded} excluded, {stats.binary} binary, {stats.empty} empty"
        )
        return records

    def _scan_directory(self, current_path: str, root_path: str) -> List[FileRecord]:
        """Scan mot folder, de quy vao cac folder con."""
        self.last_stats.directories += 1

        try:
            with os.scandir(current_path) as entries_iter:
                entries = list(entries_iter)
        except PermissionError as e:
            rel = to_relative_path(current_path, root_path)
            raise FatalScanError(rel) from e

        directories: List[os.DirEntry] = []
        files: List[os.DirEntry] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    directories.append(entry)
                elif entry.is_file():
                    files.append(entry)
            except OSError:
                continue

        directories.sort(key=lambda e: e.name.lower())
        files.sort(key=lambda e: e.name.lower())

        results: List[FileRecord] = []

        for entry in directories:
            rel_path = to_relative_path(entry.path, root_path)
            if is_ignored(self._active_rules, rel_path, is_dir=True):
                self.last_stats.ignored += 1
                continue
            results.extend(self._scan_directory(entry.path, root_path))

        for entry in files:
            rel_path = to_relative_path(entry.path, root_path)
            if is_ignored(self._active_rules, rel_path, is_dir=False):
                self.last_stats.ignored += 1
                continue

            record = self._scan_file(entry, rel_path)
            if record is not None:
                results.append(record)

        return results

    def _scan_file(self, entry: os.DirEntry, rel_path: str) -> Optional[FileRecord]:
        """Ap dung exclusion policy, binary check va dem token cho mot file."""
        filename = entry.name.lower()
        extension = os.path.splitext(filename)[1]

        if is_excluded(self._exclusion, filename, extension):
            self.last_stats.excluded += 1
            return None

        if is_binary_file(entry.path):
            self.last_stats.binary += 1
            return None

        tokens = self._token_counter.count_tokens_for_file(Path(entry.path))
        if tokens <= 0:
            self.last_stats.empty += 1
            return None

        try:
            size = entry.stat().st_size
        except OSError:
            size = 0

        self.last_stats.included += 1
        return FileRecord(relative_path=rel_path, token_count=tokens, size_bytes=size)


# Convenience function
def scan_directory(
    root_path: Union[str, Path],
    token_counter: ITokenizationService,
    exclusion: Optional[ExclusionConfig] = None,
) -> List[FileRecord]:
    """
    Scan directory voi base rules + .gitignore cua root.

    Args:
        root_path: Folder goc
        token_counter: Dich vu dem token
        exclusion: ExclusionConfig (optional)

    Returns:
        List FileRecord
    """
    scanner = FileScanner(token_counter, exclusion=exclusion)
    return scanner.scan(root_path)
