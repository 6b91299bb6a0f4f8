# pricecase/core/logging.py
# -----------------------------------------------------------------------------
# Loguru logging setup
# - rotating file sink with backtrace, plus stderr at the configured level
# - imported once by the application entry point
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from pricecase.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(exist_ok=True, parents=True)

logger.remove()  # drop the default handler
logger.add(sys.stderr, level=settings.LOG_LEVEL)
logger.add(
    LOG_DIR / "app.log",
    rotation="10 MB",
    retention=10,  # keep 10 rotated files
    enqueue=True,  # multiprocess safe
    backtrace=True,
    diagnose=True,
    level=settings.LOG_LEVEL,
)
