# campusnet/api/v1/api.py
from fastapi import APIRouter

from campusnet.api.v1.endpoints.auth_route import router as auth_router
from campusnet.api.v1.endpoints.user_route import router as user_router
from campusnet.api.v1.endpoints.message_route import router as message_router
from campusnet.api.v1.endpoints.post_route import router as post_router
from campusnet.api.v1.endpoints.notification_route import router as notification_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(user_router, prefix="/users", tags=["Users"])
api_router.include_router(message_router, prefix="/messages", tags=["Messages"])
api_router.include_router(post_router, prefix="/posts", tags=["Posts"])
api_router.include_router(notification_router, prefix="/notifications", tags=["Notifications"])
