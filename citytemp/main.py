"""FastAPI application setup and the server-rendered lookup page."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse

from .api import TEMPERATURE_SERVICE, router as api_router
from .presenter import HtmlPresenter, present_temperature
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="server")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Start with an empty cache and discard it when the process shuts down."""
    logger.info("City temperature service starting")
    yield
    TEMPERATURE_SERVICE.clear_cache()
    logger.info("City temperature service stopped")


app = FastAPI(title="City Temperature", lifespan=lifespan)


# Serve the lookup page at "/"
@app.get("/", response_class=HTMLResponse)
def serve_index(city: str | None = Query(default=None)):
    """Render the form, plus a result or error when `city` was submitted."""
    presenter = HtmlPresenter()
    if city is not None:
        present_temperature(TEMPERATURE_SERVICE, presenter, city)
    return HTMLResponse(presenter.render_page(city or ""))


# API routes
app.include_router(api_router, prefix="/v1")
