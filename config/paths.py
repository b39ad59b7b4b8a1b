"""
Application Paths - Centralized path definitions for codemass

Module nay dinh nghia tat ca cac duong dan va ten bien moi truong.
Tap trung o mot noi de tranh hardcode rai rac.

App data duoc luu tai: ~/.codemass/
- logs/      : Log files (chi khi bat debug mode)
"""

import os
from pathlib import Path
from typing import Optional


# =============================================================================
# Ten ung dung - Single source of truth cho naming
# =============================================================================
APP_NAME = "codemass"

# =============================================================================
# Thu muc goc cua ung dung
# =============================================================================
APP_DIR = Path.home() / f".{APP_NAME}"

# =============================================================================
# Cac thu muc con
# =============================================================================
LOG_DIR = APP_DIR / "logs"

# =============================================================================
# Environment Variables
# =============================================================================
DEBUG_ENV_VAR = "CODEMASS_DEBUG"

# Duong dan toi file JSON chua bang gia thay the (optional)
PRICING_FILE_ENV_VAR = "CODEMASS_PRICING_FILE"

# Kiem tra debug mode tu environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def get_pricing_file() -> Optional[Path]:
    """
    Lay duong dan file pricing tu environment variable.

    Returns:
        Path den file JSON, hoac None neu bien moi truong chua duoc set
    """
    value = os.environ.get(PRICING_FILE_ENV_VAR, "").strip()
    if not value:
        return None
    return Path(value).expanduser()
