from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from track_embed.config.settings import SUPPORTED_LOCATIONS
from track_embed.routes.templating import templates

pages_router = APIRouter()

@pages_router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html")


@pages_router.get("/docs", response_class=HTMLResponse)
async def docs(request: Request):
    return templates.TemplateResponse(request, "docs.html", {"supported_locations": SUPPORTED_LOCATIONS})
