from fastapi import APIRouter
from .pages import router as pages_router
from .users import router as users_router
from .posts import router as posts_router

router = APIRouter()

# Page, account and post routes all live at the site root
router.include_router(pages_router, tags=["pages"])
router.include_router(users_router, tags=["users"])
router.include_router(posts_router, tags=["posts"])
