from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Site
    PROJECT_NAME: str = "Hiking Trail Blog"
    VERSION: str = "1.0.0"
    POST_NEO_TYPE: str = "Post"
    COPYRIGHT_YEAR: int = 2024

    # Database
    DATABASE_URL: str = "sqlite:///./blog.db"

    # Sessions
    SECRET_KEY: str = "your-secret-key-here"  # use a real secret in production
    SESSION_COOKIE: str = "blog_session"
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60
    SESSION_HTTPS_ONLY: bool = False
    BCRYPT_ROUNDS: int = 12

    # Avatars
    AVATAR_SIZE: int = 100

    # Server
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    class Config:
        case_sensitive = True
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
