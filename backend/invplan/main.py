# backend/invplan/main.py
import os
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .apps.capacity.router import router as capacity_router
from .apps.stock_levels.router import router as stock_levels_router
from .apps.material_planning.router import router as material_planning_router


def _allowed_origins() -> List[str]:
    """
    Parse CORS_ALLOWED_ORIGINS from env.

    Comma-separated; falls back to the local dev server when unset.
    """
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["http://localhost:3000"]


app = FastAPI(title="Inventory Planning API", version="1.0.0")

# The planning endpoints are stateless and take no credentials.
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


app.include_router(capacity_router)
app.include_router(stock_levels_router)
app.include_router(material_planning_router)
