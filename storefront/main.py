# storefront/main.py
from fastapi import FastAPI
import uvicorn

from storefront.api import include_routers
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront",
        version="1.0.0",
    )

    # Include routers
    include_routers(app)

    logger.info("Storefront app created")
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=3000)
