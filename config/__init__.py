"""
Config Package - Chua cac constants va cau hinh cua codemass

Bao gom:
- model_config: Bang gia cac LLM models
- paths: App paths va ten bien moi truong
"""

from config.model_config import (
    ModelPricing,
    MODEL_PRICING,
    DEFAULT_MODEL_ID,
    get_model_pricing,
    get_pricing_table,
    list_model_ids,
    format_model_list,
)

__all__ = [
    "ModelPricing",
    "MODEL_PRICING",
    "DEFAULT_MODEL_ID",
    "get_model_pricing",
    "get_pricing_table",
    "list_model_ids",
    "format_model_list",
]
