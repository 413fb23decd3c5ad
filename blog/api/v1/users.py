from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog import crud, models, schemas
from blog.api.utils import redirect
from blog.auth import login_user, logout_user, require_user
from blog.core.logging import get_logger
from blog.database import get_db
from blog.exceptions import BlogError, UserAlreadyExists, UserNotFound
from blog.templating import templates

logger = get_logger(__name__)

router = APIRouter()


@router.post("/register")
def register(form: Annotated[schemas.UserCreate, Form()], db: Session = Depends(get_db)):
    """
    Register a new user and return to the login/register page.
    """
    try:
        crud.create_user(db, form.username, form.password)
    except UserAlreadyExists as e:
        logger.warning("Registration rejected: %s", e)
        return redirect("/register", error=e.code)
    return redirect("/register")


@router.post("/login")
def login(request: Request, form: Annotated[schemas.UserCreate, Form()], db: Session = Depends(get_db)):
    """
    Check the credentials and start a session.
    """
    try:
        user = crud.authenticate(db, form.username, form.password)
    except BlogError as e:
        logger.warning("Login rejected: %s", e)
        return redirect("/login", error=e.code)
    except SQLAlchemyError:
        logger.exception("Error in login route")
        return redirect("/login", error="Internal Server Error")

    login_user(request, user)
    return redirect("/")


@router.get("/logout")
def logout(request: Request):
    logout_user(request)
    return redirect("/")


@router.get("/profile")
def profile(request: Request,
            user: models.User = Depends(require_user),
            db: Session = Depends(get_db)):
    """
    Profile page: the logged-in user's own posts, newest first.
    """
    posts = [schemas.PostResponse.model_validate(p) for p in crud.list_user_posts(db, user.username)]
    return templates.TemplateResponse(request, "profile.html", {
        "posts": posts,
        "user": schemas.UserResponse.model_validate(user),
    })


@router.get("/avatar/{username}")
def avatar(username: str, db: Session = Depends(get_db)):
    """
    Return the user's avatar as a PNG.
    """
    try:
        image = crud.get_avatar(db, username)
    except UserNotFound:
        logger.warning("Avatar requested for unknown user %s", username)
        return Response(status_code=404)
    return Response(content=image, media_type="image/png")
