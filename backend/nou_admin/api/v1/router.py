from fastapi import APIRouter

from nou_admin.api.v1 import auth, members_import

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(members_import.router, prefix="/membres", tags=["membres"])
