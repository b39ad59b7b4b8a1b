"""
Model Configuration - Bang gia cac LLM models de uoc tinh chi phi.

Bang gia la data: mot ordered mapping model id -> ModelPricing.
Co the thay bang file JSON (bien moi truong CODEMASS_PRICING_FILE) ma khong
can sua logic scan/aggregate.

Dinh dang JSON:
    {
      "sonnet-4": {"name": "Claude Sonnet 4", "input_cost": 3.0,
                   "output_cost": 15.0, "tier": "Professional"},
      ...
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from config.paths import get_pricing_file
from core.exceptions import ConfigurationError, UnknownModelError


@dataclass(frozen=True)
class ModelPricing:
    """
    Gia cua mot LLM model.

    Attributes:
        id: ID duy nhat cua model (VD: "sonnet-4")
        name: Ten hien thi (VD: "Claude Sonnet 4")
        input_cost: USD cho 1M input tokens
        output_cost: USD cho 1M output tokens
        tier: Nhom gia khi liet ke models
    """

    id: str
    name: str
    input_cost: float
    output_cost: float
    tier: str = "Standard"


# Thu tu hien thi cac nhom gia trong --list-models
PRICE_TIERS = ["Premium", "Professional", "Standard", "Budget", "Minimal"]

_DEFAULT_MODELS: List[ModelPricing] = [
    # Anthropic Claude
    ModelPricing("opus-4", "Claude Opus 4", 15.0, 75.0, "Premium"),
    ModelPricing("sonnet-4", "Claude Sonnet 4", 3.0, 15.0, "Professional"),
    # OpenAI
    ModelPricing("gpt-5", "gpt-5", 1.25, 10.0, "Professional"),
    ModelPricing("gpt-5-mini", "gpt-5-mini", 0.25, 2.0, "Budget"),
    ModelPricing("gpt-5-nano", "gpt-5-nano", 0.05, 0.4, "Minimal"),
    ModelPricing("o3", "o3", 2.0, 8.0, "Professional"),
    ModelPricing("gpt-4.1", "GPT-4.1", 2.0, 8.0, "Professional"),
    ModelPricing("o4-mini", "o4-mini", 1.1, 4.4, "Standard"),
    ModelPricing("gpt-4.1-mini", "GPT-4.1 mini", 0.4, 1.6, "Budget"),
    ModelPricing("gpt-4.1-nano", "GPT-4.1 nano", 0.1, 0.4, "Minimal"),
    # Google Gemini
    ModelPricing("gemini-2.5-pro", "Gemini 2.5 Pro", 1.25, 10.0, "Professional"),
    ModelPricing("gemini-2.5-flash", "Gemini 2.5 Flash", 0.3, 2.5, "Budget"),
    ModelPricing("gemini-2.5-flash-lite", "Gemini 2.5 Flash-Lite", 0.1, 0.4, "Minimal"),
]

MODEL_PRICING: Dict[str, ModelPricing] = {m.id: m for m in _DEFAULT_MODELS}

# Default model (Sonnet 4 - can bang giua chi phi va kha nang)
DEFAULT_MODEL_ID = "sonnet-4"


def load_pricing_table(path: Path) -> Dict[str, ModelPricing]:
    """
    Doc bang gia tu file JSON.

    Args:
        path: Duong dan file JSON

    Returns:
        Ordered mapping model id -> ModelPricing (theo thu tu trong file)

    Raises:
        ConfigurationError: File khong doc duoc hoac sai dinh dang
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Cannot load pricing file {path}", {"reason": str(e)}
        ) from e

    if not isinstance(raw, dict) or not raw:
        raise ConfigurationError(f"Pricing file {path} must contain a non-empty object")

    table: Dict[str, ModelPricing] = {}
    for model_id, entry in raw.items():
        try:
            table[model_id] = ModelPricing(
                id=model_id,
                name=str(entry.get("name", model_id)),
                input_cost=float(entry["input_cost"]),
                output_cost=float(entry["output_cost"]),
                tier=str(entry.get("tier", "Standard")),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid pricing entry for model {model_id!r} in {path}",
                {"reason": str(e)},
            ) from e

    return table


def get_pricing_table() -> Mapping[str, ModelPricing]:
    """
    Lay bang gia dang active.

    Returns:
        Bang gia tu CODEMASS_PRICING_FILE neu duoc set, nguoc lai MODEL_PRICING
    """
    pricing_file = get_pricing_file()
    if pricing_file is None:
        return MODEL_PRICING
    return load_pricing_table(pricing_file)


def get_model_pricing(
    model_id: Optional[str] = None,
    table: Optional[Mapping[str, ModelPricing]] = None,
) -> ModelPricing:
    """
    Lay gia cua model theo ID.

    Args:
        model_id: ID cua model, None -> DEFAULT_MODEL_ID
        table: Bang gia (mac dinh MODEL_PRICING)

    Returns:
        ModelPricing

    Raises:
        UnknownModelError: Model khong co trong bang gia
    """
    if table is None:
        table = MODEL_PRICING
    resolved_id = model_id or DEFAULT_MODEL_ID

    model = table.get(resolved_id)
    if model is None:
        raise UnknownModelError(resolved_id, table.keys())
    return model


def list_model_ids(table: Optional[Mapping[str, ModelPricing]] = None) -> List[str]:
    """Danh sach model IDs theo thu tu trong bang gia."""
    return list((table if table is not None else MODEL_PRICING).keys())


def is_openai_model(model_id: str) -> bool:
    """Model dung tokenizer cua OpenAI (id bat dau bang "gpt" hoac "o")."""
    return model_id.startswith("gpt") or model_id.startswith("o")


def format_model_list(table: Optional[Mapping[str, ModelPricing]] = None) -> str:
    """
    Format danh sach models theo nhom gia cho --list-models.

    Returns:
        Text nhieu dong, moi nhom co header rieng
    """
    if table is None:
        table = MODEL_PRICING

    tiers = list(PRICE_TIERS)
    for model in table.values():
        if model.tier not in tiers:
            tiers.append(model.tier)

    groups: List[str] = []
    for tier in tiers:
        models = [m for m in table.values() if m.tier == tier]
        if not models:
            continue
        lines = [f"\n{tier}:"]
        for m in models:
            lines.append(
                f"  {m.id:<20} - {m.name:<20} "
                f"(${_format_cost(m.input_cost)}/${_format_cost(m.output_cost)} per 1M)"
            )
        groups.append("\n".join(lines))

    return "\n".join(groups)


def _format_cost(cost: float) -> str:
    """Format gia nhu JavaScript Number (3.0 -> "3", 1.25 -> "1.25")."""
    return f"{cost:g}"
