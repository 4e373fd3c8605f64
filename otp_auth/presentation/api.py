from fastapi import APIRouter

from otp_auth.presentation.routers.auth import router as auth_router
from otp_auth.presentation.routes.health import router as health_router

api = APIRouter()

# Add all /api routers here
routers = (health_router, auth_router)
for router in routers:
    api.include_router(router, prefix="/api")
