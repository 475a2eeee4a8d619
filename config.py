"""
ATTRMAP - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR   = Path(__file__).resolve().parent
SEED_PATH  = Path(os.environ.get("ATTRMAP_SEED", BASE_DIR / "catalog_seed.json"))

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("ATTRMAP_DB", f"sqlite:///{BASE_DIR / 'attrmap.sqlite'}")

# ── Indexing ───────────────────────────────────────────────────────────
DEFAULT_STORE_ID  = int(os.environ.get("ATTRMAP_DEFAULT_STORE", "0"))
# "1" keeps numeric zero / "0" in index values instead of dropping them
INDEX_ZERO_VALUES = os.environ.get("ATTRMAP_INDEX_ZERO", "0") == "1"

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("ATTRMAP_HOST", "0.0.0.0")
PORT   = int(os.environ.get("ATTRMAP_PORT", "5000"))
DEBUG  = os.environ.get("ATTRMAP_DEBUG", "0") == "1"

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("ATTRMAP_LOG_LEVEL", "INFO").upper()
