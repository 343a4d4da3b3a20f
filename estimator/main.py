from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import estimates

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("estimator")

app = FastAPI(
    title=settings.APP_NAME,
    description="Quantity and cost estimation engine for interior fit-out BOQs",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimates.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "boq-estimator"}


@app.on_event("startup")
def log_startup():
    logger.info(
        "Estimator ready: round-off policy %s, billing on %s quantity, GST %.0f%% + %.0f%%",
        settings.ROUND_OFF_POLICY, settings.BILLING_BASIS,
        settings.SGST_RATE * 100, settings.CGST_RATE * 100,
    )
