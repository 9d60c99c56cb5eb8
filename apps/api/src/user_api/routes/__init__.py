"""Route initialization module."""

from fastapi import APIRouter

from user_api.routes.health import router as health_router
from user_api.routes.health import v2_router as health_v2_router
from user_api.routes.root import router as root_router
from user_api.routes.user import router as user_router

# Versioned API routers
api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(health_router)
api_v1_router.include_router(user_router)

api_v2_router = APIRouter(prefix="/api/v2")
api_v2_router.include_router(health_v2_router)

# Unversioned routes: home, ping and the user CRUD routes at /users
base_router = APIRouter()
base_router.include_router(root_router)
base_router.include_router(user_router)


__all__ = ["api_v1_router", "api_v2_router", "base_router"]
