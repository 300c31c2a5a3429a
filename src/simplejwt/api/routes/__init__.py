from fastapi import APIRouter, Depends

from simplejwt.api.dependencies import require_api_user
from simplejwt.api.routes.auth import router as auth_router
from simplejwt.api.routes.tokens import router as tokens_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(tokens_router, dependencies=[Depends(require_api_user)])

__all__ = ["router"]
