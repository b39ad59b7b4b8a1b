"""
Report Service - Render Summary va cost estimate thanh text report.

Report gom:
- Header va tong quan (files, tokens, size, average)
- BY FILE TYPE: token theo extension, giam dan
- TOP 20 FILES BY TOKEN COUNT
- COST ESTIMATION theo model da chon (input + output, output = input size)
"""

from dataclasses import dataclass
from typing import List

from config.model_config import ModelPricing, is_openai_model
from core.aggregator import Summary, extension_percentage, top_files
from core.constants import TOP_FILES_LIMIT
from core.utils.format_utils import format_bytes, format_cost, format_number

REPORT_WIDTH = 80
SECTION_WIDTH = 40

EMPTY_RESULT_MESSAGE = "No code files found in the specified directory."


@dataclass
class CostEstimate:
    """Chi phi uoc tinh (USD) cho tong so token."""

    input_cost: float
    output_cost: float

    @property
    def total_cost(self) -> float:
        return self.input_cost + self.output_cost


def estimate_cost(total_tokens: int, pricing: ModelPricing) -> CostEstimate:
    """
    Uoc tinh chi phi neu gui toan bo tokens lam input va nhan lai cung so luong output.

    Args:
        total_tokens: Tong so token
        pricing: Gia cua model

    Returns:
        CostEstimate
    """
    millions = total_tokens / 1_000_000
    return CostEstimate(
        input_cost=millions * pricing.input_cost,
        output_cost=millions * pricing.output_cost,
    )


def render_header(root: str) -> str:
    return f"\n⚖️  Weighing: {root}\n"


def render_summary(
    summary: Summary,
    encoding_label: str = "o200k_base tokenizer",
    is_estimated: bool = False,
) -> List[str]:
    """
    Render phan tong quan, BY FILE TYPE va TOP FILES.

    Average chi duoc tinh khi co it nhat mot file.
    """
    label = f"estimated, {encoding_label} unavailable" if is_estimated else encoding_label

    lines = [
        "=" * REPORT_WIDTH,
        "CODEMASS ANALYSIS",
        "=" * REPORT_WIDTH,
        f"Total Files: {format_number(summary.total_files)}",
        f"Total Tokens: {format_number(summary.total_tokens)} ({label})",
        f"Total Size: {format_bytes(summary.total_bytes)}",
    ]
    if summary.average_tokens_per_file is not None:
        lines.append(
            f"Average Tokens/File: {format_number(summary.average_tokens_per_file)}"
        )

    lines.append("\nBY FILE TYPE:")
    lines.append("-" * SECTION_WIDTH)
    for bucket in summary.by_extension.values():
        pct = extension_percentage(bucket, summary.total_tokens)
        pct_text = f"{pct:.1f}" if pct is not None else "-"
        lines.append(
            f"{bucket.extension:<10} {format_number(bucket.token_sum):>12} tokens "
            f"({pct_text:>4}%) - {bucket.file_count} files"
        )

    lines.append(f"\nTOP {TOP_FILES_LIMIT} FILES BY TOKEN COUNT:")
    lines.append("-" * REPORT_WIDTH)
    lines.append(f"{'Tokens':>10}    {'Size':>10}    Path")
    lines.append("-" * REPORT_WIDTH)
    for record in top_files(summary):
        lines.append(
            f"{format_number(record.token_count):>10}    "
            f"{format_bytes(record.size_bytes):>10}    {record.relative_path}"
        )

    return lines


def render_cost(total_tokens: int, model_id: str, pricing: ModelPricing) -> List[str]:
    """
    Render COST ESTIMATION block.

    Model khong phai OpenAI se co them ghi chu ve tokenizer.
    """
    cost = estimate_cost(total_tokens, pricing)
    lines = [
        f"\n{'=' * REPORT_WIDTH}",
        f"COST ESTIMATION ({pricing.name}):",
        f"Input:  ~${format_cost(cost.input_cost)} (${pricing.input_cost:g}/1M tokens)",
        f"Output: ~${format_cost(cost.output_cost)} (${pricing.output_cost:g}/1M tokens)",
        f"Total:  ~${format_cost(cost.total_cost)} (if output = input size)",
    ]

    if not is_openai_model(model_id):
        lines.append(
            "\nNote: Token count is estimated using OpenAI's tokenizer (o200k_base)."
        )
        lines.append("      Actual tokens for non-OpenAI models may vary slightly.")

    lines.append("=" * REPORT_WIDTH)
    return lines


def render_report(
    summary: Summary,
    model_id: str,
    pricing: ModelPricing,
    encoding_label: str = "o200k_base tokenizer",
    is_estimated: bool = False,
) -> str:
    """
    Render toan bo report (khong gom header "Weighing").

    Args:
        summary: Ket qua aggregate
        model_id: Model ID dung de uoc tinh chi phi
        pricing: Gia cua model
        encoding_label: Ten tokenizer hien thi
        is_estimated: True neu token count la uoc luong

    Returns:
        Report text
    """
    if summary.total_files == 0:
        return EMPTY_RESULT_MESSAGE

    lines = render_summary(summary, encoding_label, is_estimated)
    lines.extend(render_cost(summary.total_tokens, model_id, pricing))
    return "\n".join(lines)
