# storefront/api/__init__.py
from fastapi import FastAPI
from storefront.api.routers import cart, health, home


def include_routers(app: FastAPI) -> FastAPI:
    app.include_router(health.router)
    app.include_router(home.router)
    app.include_router(cart.router)
    return app
