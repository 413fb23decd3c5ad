from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from blog import crud, models, schemas
from blog.api.utils import MAX_DB_INT
from blog.auth import get_current_user
from blog.database import get_db
from blog.templating import templates

router = APIRouter()


@router.get("/")
def home(request: Request,
         error: Optional[str] = None,
         skip: int = Query(0, ge=0, le=MAX_DB_INT),
         limit: int = Query(50, ge=1, le=100),
         user: Optional[models.User] = Depends(get_current_user),
         db: Session = Depends(get_db)):
    """Home page: every post, newest first."""
    posts = [schemas.PostResponse.model_validate(p) for p in crud.list_posts(db, skip=skip, limit=limit)]
    return templates.TemplateResponse(request, "home.html", {
        "posts": posts,
        "user": schemas.UserResponse.model_validate(user) if user else None,
        "error": error,
    })


@router.get("/register")
def register_page(request: Request, error: Optional[str] = None):
    return templates.TemplateResponse(request, "login_register.html", {"regError": error})


@router.get("/login")
def login_page(request: Request, error: Optional[str] = None):
    return templates.TemplateResponse(request, "login_register.html", {"loginError": error})


@router.get("/error")
def error_page(request: Request, error: Optional[str] = None):
    return templates.TemplateResponse(request, "error.html", {"error": error})
