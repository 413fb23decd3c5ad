from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from blog.api.utils import redirect
from blog.api.v1 import router as v1_router
from blog.core.config import get_settings
from blog.core.logging import get_logger, setup_logging
from blog.database import init_db
from blog.exceptions import NotAuthenticated
from blog.templating import TEMPLATES_DIR

setup_logging()
logger = get_logger(__name__)

settings = get_settings()

# Form posts whose validation errors go back to the page they came from
FORM_PAGES = ("/register", "/login")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s started", settings.PROJECT_NAME)
    yield


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    https_only=settings.SESSION_HTTPS_ONLY,
)

app.mount("/static", StaticFiles(directory=str(TEMPLATES_DIR.parent / "static")), name="static")
app.include_router(v1_router)


@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return redirect("/login")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid input for %s %s: %s", request.method, request.url.path, exc.errors())
    if request.url.path in FORM_PAGES:
        return redirect(request.url.path, error="Invalid Input")
    return redirect("/error", error="Invalid Input")


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return redirect("/error", error="Internal Server Error")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return redirect("/error", error="Internal Server Error")
