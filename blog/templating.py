from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from blog.core.config import get_settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def site_globals(request: Request) -> dict:
    """Values every page template can use."""
    settings = get_settings()
    return {
        "app_name": settings.PROJECT_NAME,
        "copyright_year": settings.COPYRIGHT_YEAR,
        "post_neo_type": settings.POST_NEO_TYPE,
        "logged_in": request.session.get("logged_in", False),
        "user_id": request.session.get("user_id", ""),
    }


templates = Jinja2Templates(directory=str(TEMPLATES_DIR), context_processors=[site_globals])
