from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from snackbar.domain.Errors import ConfigurationError
from snackbar.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from snackbar.api.routes import catalog, products

# Logging
logger = logging.getLogger("snackbar_app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register event bus subscribers for web alerts when the app starts."""
    start_event_observers()
    yield


# Initialize FastAPI app
app = FastAPI(title="Snack Bar Configurator API", lifespan=lifespan)

# Include routers
app.include_router(catalog.router)
app.include_router(products.router)


@app.exception_handler(ConfigurationError)
async def _configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.get("/api/events")
def recent_events(since: Optional[int] = Query(default=None)):
    """Recent build outcomes; poll with since=<next_cursor>."""
    return get_web_events(since)
