"""Index — the site root sends visitors to the book list."""

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["index"])


@router.get("/")
async def index():
    return RedirectResponse("/books", status_code=status.HTTP_302_FOUND)
