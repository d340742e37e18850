"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from stichting.api.routes import auth, users, uitjes, uploads, settings

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(uitjes.router)
api_router.include_router(uploads.router)
api_router.include_router(settings.router)


@api_router.get("/health", tags=["health"])
async def health():
    """Liveness check."""
    return {"ok": True}
