"""
Persistence operations over users and posts.

Functions take an open SQLAlchemy session and commit their own changes.
Expected failures are raised as ``blog.exceptions`` errors; anything else
from SQLAlchemy propagates to the application's error handler.
"""

from datetime import datetime
from typing import List, Optional

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blog import models
from blog.avatar import first_letter, generate_avatar
from blog.core.config import get_settings
from blog.core.logging import get_logger
from blog.exceptions import (
    InvalidCredentials,
    NotPostAuthor,
    PostNotFound,
    UserAlreadyExists,
    UserNotFound,
)

logger = get_logger(__name__)


# ============================================================
# Users
# ============================================================


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def _hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=get_settings().BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode(), salt).decode()


def _new_avatar(username: str) -> bytes:
    size = get_settings().AVATAR_SIZE
    return generate_avatar(first_letter(username), width=size, height=size)


def create_user(db: Session, username: str, password: str) -> models.User:
    if get_user_by_username(db, username):
        raise UserAlreadyExists(f"Username {username!r} is already registered")

    db_user = models.User(
        username=username,
        identity_token=_hash_password(password),
        avatar=_new_avatar(username),
        member_since=datetime.now(),
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        db.rollback()
        raise UserAlreadyExists(f"Username {username!r} is already registered")
    db.refresh(db_user)
    logger.info("Registered user %s", username)
    return db_user


def authenticate(db: Session, username: str, password: str) -> models.User:
    user = get_user_by_username(db, username)
    if not user:
        raise UserNotFound(f"User {username!r} not found")
    if not bcrypt.checkpw(password.encode(), user.identity_token.encode()):
        raise InvalidCredentials(f"Wrong password for {username!r}")
    return user


def get_avatar(db: Session, username: str) -> bytes:
    """Return the stored avatar, generating and saving one if it is missing."""
    user = get_user_by_username(db, username)
    if not user:
        raise UserNotFound(f"User {username!r} not found")
    if not user.avatar:
        user.avatar = _new_avatar(user.username)
        db.commit()
        logger.info("Generated missing avatar for %s", username)
    return user.avatar


# ============================================================
# Posts
# ============================================================


def list_posts(db: Session, skip: int = 0, limit: int = 50) -> List[models.Post]:
    return db.query(models.Post)\
        .order_by(models.Post.timestamp.desc(), models.Post.id.desc())\
        .offset(skip)\
        .limit(limit)\
        .all()


def list_user_posts(db: Session, username: str) -> List[models.Post]:
    return db.query(models.Post)\
        .filter(models.Post.username == username)\
        .order_by(models.Post.timestamp.desc(), models.Post.id.desc())\
        .all()


def get_post(db: Session, post_id: int) -> Optional[models.Post]:
    return db.query(models.Post).filter(models.Post.id == post_id).first()


def create_post(db: Session, title: str, content: str, username: str) -> models.Post:
    if not get_user_by_username(db, username):
        raise UserNotFound(f"User {username!r} not found")

    db_post = models.Post(
        title=title,
        content=content,
        username=username,
        timestamp=datetime.now(),
        likes=0,
    )
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    logger.info("User %s created post %s", username, db_post.id)
    return db_post


def like_post(db: Session, post_id: int) -> int:
    """Add one like to a post and return its new like count."""
    if not get_post(db, post_id):
        raise PostNotFound(f"Post {post_id} not found")

    # Increment in SQL so concurrent likes are not lost
    db.execute(
        models.Post.__table__.update()
        .where(models.Post.id == post_id)
        .values(likes=models.Post.likes + 1)
    )
    db.commit()
    likes = db.query(models.Post.likes).filter(models.Post.id == post_id).scalar()
    logger.info("Post %s liked (%s likes)", post_id, likes)
    return likes


def delete_post(db: Session, post_id: int, username: str) -> None:
    post = get_post(db, post_id)
    if not post:
        raise PostNotFound(f"Post {post_id} not found")
    if post.username != username:
        raise NotPostAuthor(f"{username!r} is not the author of post {post_id}")

    db.delete(post)
    db.commit()
    logger.info("User %s deleted post %s", username, post_id)
