"""FastAPI server exposing scheme extraction over HTTP."""

from __future__ import annotations

import logging
from typing import Any, Dict, Union

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import Config, load_config
from .errors import ScrapeError
from .paths import make_paths_relative
from .scheme import parse_scheme
from .boundary import scrape_value

logger = logging.getLogger(__name__)


class ScrapeRequest(BaseModel):
    content: str
    instructions: Union[str, Dict[str, Any]]


class RelativizeRequest(BaseModel):
    scheme: Dict[str, Any]


def _error(exc: ScrapeError) -> JSONResponse:
    logger.warning("Request failed: %s", exc)
    return JSONResponse(status_code=422, content={"error": str(exc)})


def create_app(config_path: str | None = None) -> FastAPI:
    config = load_config(config_path)

    app = FastAPI(title="scheme-scraper")
    app.state.config = config

    def get_config() -> Config:
        return app.state.config

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/scrape")
    def scrape_endpoint(req: ScrapeRequest, config: Config = Depends(get_config)):
        try:
            return scrape_value(req.content, req.instructions, config)
        except ScrapeError as exc:
            return _error(exc)

    @app.post("/relativize")
    def relativize(req: RelativizeRequest):
        try:
            scheme = parse_scheme(req.scheme)
        except ScrapeError as exc:
            return _error(exc)
        return make_paths_relative(scheme).model_dump(mode="json", exclude_none=True)

    return app


app = create_app()


__all__ = ["app", "create_app"]
