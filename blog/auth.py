"""Session layer: who is logged in, and the login-required dependency."""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from blog import crud, models
from blog.core.logging import get_logger
from blog.database import get_db
from blog.exceptions import NotAuthenticated

logger = get_logger(__name__)


def login_user(request: Request, user: models.User) -> None:
    request.session["user_id"] = user.id
    request.session["username"] = user.username
    request.session["logged_in"] = True
    logger.info("Logged in %s", user.username)


def logout_user(request: Request) -> None:
    username = request.session.get("username")
    request.session.clear()
    if username:
        logger.info("Logged out %s", username)


def session_username(request: Request) -> Optional[str]:
    return request.session.get("username")


def get_current_user(request: Request, db: Session = Depends(get_db)) -> Optional[models.User]:
    user_id = request.session.get("user_id")
    if user_id is None:
        return None
    return crud.get_user(db, user_id)


def require_user(user: Optional[models.User] = Depends(get_current_user)) -> models.User:
    """Dependency for routes that need a logged-in user."""
    if user is None:
        raise NotAuthenticated("Login required")
    return user
