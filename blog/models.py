from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime, LargeBinary, ForeignKey, CheckConstraint
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    identity_token = Column(String(128), nullable=False)
    avatar = Column(LargeBinary)
    member_since = Column(DateTime, default=datetime.now, nullable=False)

    posts = relationship("Post", back_populates="author")

class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (CheckConstraint("likes >= 0", name="ck_posts_likes_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    username = Column(String(50), ForeignKey("users.username"), index=True, nullable=False)
    timestamp = Column(DateTime, default=datetime.now, nullable=False)
    likes = Column(Integer, default=0, nullable=False)

    author = relationship("User", back_populates="posts")
