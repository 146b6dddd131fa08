from __future__ import annotations

import os

LOG_LEVEL = os.getenv("MATHBUDDY_LOG_LEVEL", "INFO").upper()

# Allow calls from the Next.js dev server by default
_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("MATHBUDDY_CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]

try:
    MAX_BATCH = max(1, int(os.getenv("MATHBUDDY_MAX_BATCH", "20")))
except ValueError:
    MAX_BATCH = 20
