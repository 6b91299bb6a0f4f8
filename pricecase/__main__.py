# pricecase/__main__.py
# -----------------------------------------------------------------------------
# `python -m pricecase` / `pricecase` console script: serve the API with uvicorn
# -----------------------------------------------------------------------------
import uvicorn

from pricecase.core.config import settings


def main() -> None:
    uvicorn.run(
        "pricecase.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENV == "dev",
    )


if __name__ == "__main__":
    main()
