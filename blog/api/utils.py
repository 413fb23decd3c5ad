from typing import Optional
from urllib.parse import quote

from fastapi import status
from fastapi.responses import RedirectResponse

# Largest value a SQLite INTEGER column can hold
MAX_DB_INT = 2**63 - 1


def redirect(path: str, error: Optional[str] = None) -> RedirectResponse:
    """See-other redirect, optionally carrying an ``?error=`` code."""
    if error:
        path = f"{path}?error={quote(error)}"
    return RedirectResponse(path, status_code=status.HTTP_303_SEE_OTHER)
