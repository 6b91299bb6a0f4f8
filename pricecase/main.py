# pricecase/main.py
# -----------------------------------------------------------------------------
# FastAPI entry point
# - snapshot table is created on startup
# -----------------------------------------------------------------------------
from fastapi import FastAPI
from loguru import logger

import pricecase.core.logging  # noqa: F401  (configures loguru sinks)
from pricecase.core.config import settings
from pricecase.db.session import init_models
from pricecase.routers import presets, share, simulate

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
async def on_startup():
    await init_models()
    logger.info("{} started (env={})", settings.APP_NAME, settings.ENV)


app.include_router(simulate.router)
app.include_router(presets.router)
app.include_router(share.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
