from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.append(str(ROOT))

os.environ.setdefault("CORS_ALLOWED_ORIGINS", "http://localhost:3000")
