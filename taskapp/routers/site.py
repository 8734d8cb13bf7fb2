"""Fixed pages of the personal site."""

from __future__ import annotations

import logging
import os

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["site"])

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _site_dir(request: Request) -> str:
    site_dir = getattr(getattr(request.app, "state", None), "site_dir", None)
    if site_dir:
        return site_dir
    raise RuntimeError("Site directory is not configured")


def render_view(request: Request, page: str, status_code: int = 200) -> HTMLResponse:
    path = os.path.join(_site_dir(request), "views", page)
    with open(path, "r", encoding="utf-8") as handle:
        return HTMLResponse(handle.read(), status_code=status_code)


def render_static(request: Request, asset: str) -> Response:
    path = os.path.join(_site_dir(request), "public", asset)
    with open(path, "r", encoding="utf-8") as handle:
        # Served as text/html like every other response of the site
        return Response(handle.read(), media_type="text/html")


@router.api_route("/", methods=ANY_METHOD, response_class=HTMLResponse)
def index(request: Request):
    return render_view(request, "index.html")


@router.api_route("/about", methods=ANY_METHOD, response_class=HTMLResponse)
def about(request: Request):
    return render_view(request, "about.html")


@router.api_route("/main.css", methods=ANY_METHOD)
def css(request: Request):
    return render_static(request, "main.css")


@router.api_route("/{path:path}", methods=ANY_METHOD, response_class=HTMLResponse, include_in_schema=False)
def error(request: Request, path: str):
    logger.debug("No page for /%s", path)
    return render_view(request, "error.html", status_code=404)
