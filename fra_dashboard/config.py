# fra_dashboard/config.py
"""
Runtime configuration, read once from the environment (.env supported).
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

# ----------------------------
# Static data location
# ----------------------------
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "fixtures"

DATA_DIR = Path(os.getenv("FRA_DATA_DIR", str(DEFAULT_DATA_DIR)))
CLAIMS_FILE = os.getenv("FRA_CLAIMS_FILE", "claims.json")
LOCATIONS_FILE = os.getenv("FRA_LOCATIONS_FILE", "locations.json")
SCHEMES_FILE = os.getenv("FRA_SCHEMES_FILE", "schemes.json")

# Label used for the top of the hierarchy (no geographic filter set)
NATIONAL_LABEL = os.getenv("FRA_NATIONAL_LABEL", "All India")

# ----------------------------
# Logging / HTTP
# ----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_DEFAULT_ORIGINS = ",".join([
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
])


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]
