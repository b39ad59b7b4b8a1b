"""
Tests cho core.aggregator - tong hop FileRecord thanh Summary.
"""

import pytest

from core.aggregator import (
    ExtensionBucket,
    Summary,
    extension_key,
    extension_percentage,
    round_half_up,
    summarize,
    top_files,
)
from core.types import FileRecord


def rec(path: str, tokens: int, size: int = 100) -> FileRecord:
    return FileRecord(relative_path=path, token_count=tokens, size_bytes=size)


class TestSummarize:
    def test_empty(self):
        summary = summarize([])
        assert summary == Summary()
        assert summary.average_tokens_per_file is None
        assert summary.ranked_files == []
        assert summary.by_extension == {}

    def test_totals(self):
        summary = summarize([rec("a.py", 10, 50), rec("b.js", 30, 150)])
        assert summary.total_files == 2
        assert summary.total_tokens == 40
        assert summary.total_bytes == 200
        assert summary.average_tokens_per_file == 20

    def test_average_round_half_up(self):
        summary = summarize([rec("a.py", 1), rec("b.py", 2)])
        # 1.5 -> 2 (khong phai banker's rounding)
        assert summary.average_tokens_per_file == 2

        summary = summarize([rec("a.py", 2), rec("b.py", 3)])
        assert summary.average_tokens_per_file == 3

    def test_ranking_giam_dan(self):
        summary = summarize([rec("a.py", 5), rec("b.py", 50), rec("c.py", 20)])
        assert [r.relative_path for r in summary.ranked_files] == ["b.py", "c.py", "a.py"]

    def test_ranking_stable(self):
        """File bang token giu thu tu scan."""
        records = [rec("z.py", 7), rec("a.py", 7), rec("m.py", 9), rec("b.py", 7)]
        summary = summarize(records)
        assert [r.relative_path for r in summary.ranked_files] == [
            "m.py",
            "z.py",
            "a.py",
            "b.py",
        ]

    def test_extension_buckets_partition(self):
        records = [
            rec("src/a.py", 10),
            rec("src/b.PY", 5),
            rec("web/c.ts", 40),
            rec("Makefile", 3),
            rec("docs/README.md", 2),
        ]
        summary = summarize(records)

        assert summary.by_extension[".py"] == ExtensionBucket(".py", 2, 15)
        assert summary.by_extension["no-ext"] == ExtensionBucket("no-ext", 1, 3)
        assert sum(b.file_count for b in summary.by_extension.values()) == 5
        assert sum(b.token_sum for b in summary.by_extension.values()) == summary.total_tokens

    def test_extension_order_theo_token(self):
        records = [rec("a.md", 1), rec("b.ts", 40), rec("c.py", 10)]
        summary = summarize(records)
        assert list(summary.by_extension) == [".ts", ".py", ".md"]


class TestHelpers:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("a.py", ".py"),
            ("src/App.TSX", ".tsx"),
            ("Makefile", "no-ext"),
            (".gitignore", "no-ext"),
            ("pkg.v1/Dockerfile", "no-ext"),
            ("a.test.ts", ".ts"),
        ],
    )
    def test_extension_key(self, path, expected):
        assert extension_key(path) == expected

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_extension_percentage(self):
        bucket = ExtensionBucket(".py", 1, 25)
        assert extension_percentage(bucket, 100) == pytest.approx(25.0)
        assert extension_percentage(bucket, 0) is None

    def test_top_files_limit(self):
        records = [rec(f"f{i:02d}.py", i + 1) for i in range(25)]
        summary = summarize(records)

        top = top_files(summary)

        assert len(top) == 20
        assert top[0].relative_path == "f24.py"
        assert top[-1].relative_path == "f05.py"

    def test_top_files_it_hon_limit(self):
        summary = summarize([rec("a.py", 1), rec("b.py", 2)])
        assert len(top_files(summary)) == 2
