"""
Tests cho services.report_service va core.utils.format_utils.
"""

import pytest

from config.model_config import get_model_pricing
from core.aggregator import summarize
from core.types import FileRecord
from core.utils.format_utils import format_bytes, format_cost, format_number
from services.report_service import (
    EMPTY_RESULT_MESSAGE,
    estimate_cost,
    render_cost,
    render_header,
    render_report,
    render_summary,
)


class TestFormatUtils:
    @pytest.mark.parametrize(
        "n, expected", [(0, "0"), (999, "999"), (1234, "1,234"), (1234567, "1,234,567")]
    )
    def test_format_number(self, n, expected):
        assert format_number(n) == expected

    @pytest.mark.parametrize(
        "size, expected",
        [(0, "0 B"), (512, "512 B"), (1536, "1.50 KB"), (2 * 1024 * 1024, "2.00 MB")],
    )
    def test_format_bytes(self, size, expected):
        assert format_bytes(size) == expected

    def test_format_cost(self):
        assert format_cost(3) == "3.00"
        assert format_cost(0.004) == "0.00"
        assert format_cost(18.456) == "18.46"


class TestCostEstimate:
    def test_one_million_sonnet(self):
        cost = estimate_cost(1_000_000, get_model_pricing("sonnet-4"))
        assert cost.input_cost == pytest.approx(3.0)
        assert cost.output_cost == pytest.approx(15.0)
        assert cost.total_cost == pytest.approx(18.0)

    def test_render_cost_sonnet(self):
        text = "\n".join(render_cost(1_000_000, "sonnet-4", get_model_pricing("sonnet-4")))
        assert "COST ESTIMATION (Claude Sonnet 4):" in text
        assert "Input:  ~$3.00 ($3/1M tokens)" in text
        assert "Output: ~$15.00 ($15/1M tokens)" in text
        assert "Total:  ~$18.00 (if output = input size)" in text
        assert "Note: Token count is estimated" in text

    def test_openai_model_khong_co_note(self):
        text = "\n".join(render_cost(1000, "gpt-5", get_model_pricing("gpt-5")))
        assert "Note:" not in text


class TestRenderReport:
    def _summary(self):
        return summarize(
            [
                FileRecord("src/main.py", 1500, 6000),
                FileRecord("README.md", 500, 2048),
                FileRecord("Makefile", 20, 80),
            ]
        )

    def test_empty(self):
        report = render_report(summarize([]), "sonnet-4", get_model_pricing())
        assert report == EMPTY_RESULT_MESSAGE

    def test_header(self):
        assert render_header("/tmp/proj") == "\n⚖️  Weighing: /tmp/proj\n"

    def test_sections(self):
        report = render_report(self._summary(), "sonnet-4", get_model_pricing())
        lines = report.split("\n")

        assert lines[0] == "=" * 80
        assert lines[1] == "CODEMASS ANALYSIS"
        assert "Total Files: 3" in lines
        assert "Total Tokens: 2,020 (o200k_base tokenizer)" in lines
        assert "Average Tokens/File: 673" in lines
        assert "BY FILE TYPE:" in report
        assert "TOP 20 FILES BY TOKEN COUNT:" in report
        assert report.index("src/main.py") < report.index("README.md")
        assert lines[-1] == "=" * 80

    def test_extension_rows(self):
        lines = render_summary(self._summary())
        py_row = next(line for line in lines if line.startswith(".py"))
        assert py_row == f"{'.py':<10} {'1,500':>12} tokens (74.3%) - 1 files"
        assert any(line.startswith("no-ext") for line in lines)

    def test_file_rows(self):
        lines = render_summary(self._summary())
        assert f"{'1,500':>10}    {'5.86 KB':>10}    src/main.py" in lines

    def test_estimated_label(self):
        lines = render_summary(self._summary(), "o200k_base tokenizer", is_estimated=True)
        assert (
            "Total Tokens: 2,020 (estimated, o200k_base tokenizer unavailable)" in lines
        )
