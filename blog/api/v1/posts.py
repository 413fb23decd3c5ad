from typing import Annotated

from fastapi import APIRouter, Depends, Form, Path, Request
from sqlalchemy.orm import Session

from blog import crud, models, schemas
from blog.api.utils import MAX_DB_INT, redirect
from blog.auth import require_user, session_username
from blog.core.logging import get_logger
from blog.database import get_db
from blog.exceptions import NotPostAuthor, PostNotFound

logger = get_logger(__name__)

router = APIRouter()


@router.post("/posts")
def create_post(form: Annotated[schemas.PostCreate, Form()],
                user: models.User = Depends(require_user),
                db: Session = Depends(get_db)):
    crud.create_post(db, form.title, form.content, user.username)
    return redirect("/")


@router.post("/like/{post_id}")
def like_post(request: Request,
              post_id: int = Path(..., ge=1, le=MAX_DB_INT),
              db: Session = Depends(get_db)):
    # Anonymous likes are ignored
    if session_username(request) is None:
        return redirect("/")
    try:
        crud.like_post(db, post_id)
    except PostNotFound as e:
        logger.warning("Like rejected: %s", e)
        return redirect("/", error=e.code)
    return redirect("/")


@router.post("/delete/{post_id}")
def delete_post(post_id: int = Path(..., ge=1, le=MAX_DB_INT),
                user: models.User = Depends(require_user),
                db: Session = Depends(get_db)):
    try:
        crud.delete_post(db, post_id, user.username)
    except (PostNotFound, NotPostAuthor) as e:
        logger.warning("Delete rejected: %s", e)
        return redirect("/", error=e.code)
    return redirect("/")
