"""
Ignore Engine - Single source of truth cho tat ca logic ignore/gitignore.

Cung cap:
- build_ignore_patterns(): Tap hop patterns tu base rules + .gitignore
- compile_rules(): Tao IgnoreRuleSet (pathspec.GitIgnoreSpec) tu patterns
- build_pathspec(): build_ignore_patterns() + compile_rules() trong mot buoc
- read_gitignore(): Doc .gitignore o scan root
- is_ignored(): Kiem tra mot relative path (file hoac folder) co bi ignore khong

Rule set duoc build mot lan cho moi scan root va khong bao gio bi thay doi
trong luc duyet cay thu muc. Rule sau override rule truoc (last match wins),
`!pattern` re-include, `pattern/` chi match folder.

SOLID: Single Responsibility - chi lo viec quyet dinh "file/folder nay co bi ignore khong"
"""

from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from core.constants import BASE_IGNORE_PATTERNS
from core.logging_config import log_warning

# Ten ignore file o scan root
GITIGNORE_FILENAME = ".gitignore"

IgnoreRuleSet = pathspec.GitIgnoreSpec


def build_ignore_patterns(
    root_path: Path,
    *,
    use_gitignore: bool = True,
) -> List[str]:
    """
    Tap hop tat ca ignore patterns.

    Thu tu: Base rules > Gitignore. Gitignore dung sau nen co the override
    base rules bang negation (`!dist`).

    Args:
        root_path: Thu muc goc cua scan
        use_gitignore: Co doc .gitignore khong (default: True)

    Returns:
        List cac ignore patterns (gitignore format)
    """
    patterns: List[str] = list(BASE_IGNORE_PATTERNS)

    if use_gitignore:
        patterns.extend(read_gitignore(root_path))

    return patterns


def compile_rules(
    base_rules: Iterable[str],
    ignore_file_content: Optional[str] = None,
) -> IgnoreRuleSet:
    """
    Compile base rules va noi dung ignore file (neu co) thanh IgnoreRuleSet.

    Blank lines va comment (`#`) duoc pathspec bo qua. Dong khong hop le
    (vd `!` hoac `\\` dung mot minh) bi bo qua voi warning, giong git.

    Args:
        base_rules: Cac rules luon active
        ignore_file_content: Noi dung .gitignore (raw text) hoac None

    Returns:
        pathspec.GitIgnoreSpec
    """
    lines = list(base_rules)
    if ignore_file_content:
        lines.extend(ignore_file_content.splitlines())
    return pathspec.GitIgnoreSpec.from_lines(_valid_lines(lines))


def _valid_lines(lines: Iterable[str]) -> List[str]:
    """Loc bo cac dong pathspec khong compile duoc."""
    valid: List[str] = []
    for line in lines:
        try:
            pathspec.GitIgnoreSpec.from_lines([line])
        except ValueError as e:
            log_warning(f"[IgnoreEngine] Bo qua ignore pattern khong hop le {line!r}: {e}")
            continue
        valid.append(line)
    return valid


def build_pathspec(
    root_path: Path,
    *,
    use_gitignore: bool = True,
) -> IgnoreRuleSet:
    """
    Tao IgnoreRuleSet tu base rules va .gitignore cua root_path.

    Args:
        root_path: Thu muc goc cua scan
        use_gitignore: Co doc .gitignore khong

    Returns:
        pathspec.GitIgnoreSpec de match files/folders
    """
    patterns = build_ignore_patterns(root_path, use_gitignore=use_gitignore)
    return compile_rules(patterns)


def read_gitignore(root_path: Path) -> List[str]:
    """
    Doc .gitignore o root_path.

    Chi doc ignore file o scan root, khong doc .gitignore long nhau
    hay global gitignore. File khong doc duoc -> log warning, tra ve [].

    Args:
        root_path: Thu muc goc chua .gitignore

    Returns:
        List cac gitignore patterns (raw lines tu file)
    """
    gitignore_path = root_path / GITIGNORE_FILENAME
    if not gitignore_path.is_file():
        return []

    try:
        content = gitignore_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log_warning(f"[IgnoreEngine] Khong doc duoc {gitignore_path}: {e}")
        return []

    return content.splitlines()


def to_match_path(relative_path: str, is_dir: bool) -> str:
    """
    Chuan hoa relative path de match voi pathspec.

    Folder duoc them `/` o cuoi de cac rule dang `build/` match dung.
    """
    normalized = relative_path.replace("\\", "/").strip("/")
    if is_dir:
        return normalized + "/"
    return normalized


def is_ignored(rule_set: IgnoreRuleSet, relative_path: str, is_dir: bool) -> bool:
    """
    Kiem tra relative path co bi ignore khong.

    Args:
        rule_set: IgnoreRuleSet da compile
        relative_path: Path tuong doi voi scan root (separator `/`)
        is_dir: True neu path la folder

    Returns:
        True neu path bi ignore
    """
    return rule_set.match_file(to_match_path(relative_path, is_dir))
