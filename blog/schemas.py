from datetime import datetime

from pydantic import BaseModel, Field, field_validator

# bcrypt only hashes the first 72 bytes and newer releases refuse longer input
BCRYPT_MAX_BYTES = 72

# Form payloads
class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=64)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode()) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v

class PostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)

# View models
class UserResponse(BaseModel):
    id: int
    username: str
    member_since: datetime

    class Config:
        from_attributes = True

class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    username: str
    timestamp: datetime
    likes: int

    class Config:
        from_attributes = True
