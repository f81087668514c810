"""Environment-variable-based configuration for the fatigue engine."""

from __future__ import annotations

import os
from pathlib import Path

BODY_WEIGHT_KG: float = float(os.environ.get("FATIGUE_BODY_WEIGHT_KG", "70.0"))

_catalog_path = os.environ.get("FATIGUE_CATALOG_PATH", "")
CATALOG_PATH: Path | None = Path(_catalog_path).expanduser() if _catalog_path else None
