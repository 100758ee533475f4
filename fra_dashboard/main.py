# fra_dashboard/main.py
"""
FastAPI entrypoint for the FRA dashboard data API.

Notes:
- Configuration comes from the environment / .env (see fra_dashboard.config)
- Static fixtures are loaded once, on first use, and shared by every request
- All routes are read-only and mounted under /api
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fra_dashboard import config
from fra_dashboard.routes.locations import router as locations_router
from fra_dashboard.routes.progress import router as progress_router
from fra_dashboard.routes.statistics import router as statistics_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Create app and configure
# ----------------------------------------------------------------------
app = FastAPI(title="FRA Dashboard API")

app.include_router(progress_router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(statistics_router, prefix="/api")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

logger.info("FRA dashboard serving fixtures from %s", config.DATA_DIR)


# -----------------------------------------------------------------------------
# Health & Ping
# -----------------------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/ping")
def ping():
    return {"message": "pong", "service": "FRA Dashboard"}
