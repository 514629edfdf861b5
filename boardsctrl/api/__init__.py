"""API routes."""

from fastapi import APIRouter

from boardsctrl.api import auth, boards, categories, health, roles, slides, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(roles.router, prefix="/roles", tags=["roles"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(boards.router, prefix="/boards", tags=["boards"])
router.include_router(slides.router, prefix="/slides", tags=["slides"])
