"""Ruta de verificación del estado del servicio."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Indica que la API está en funcionamiento."""

    return {"status": "ok"}
