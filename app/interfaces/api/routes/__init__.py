from fastapi import FastAPI

from .health import router as health_router
from .rooms import router as rooms_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(health_router)
    app.include_router(rooms_router)
    app.include_router(users_router)
