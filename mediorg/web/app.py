"""
Application FastAPI de MediOrg.

Initialise l'application web avec le Container DI et monte les routes JSON.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..container import Container
from .routes.config import router as config_router
from .routes.media import router as media_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage."""
    app.state.container = Container()
    yield


app = FastAPI(title="MediOrg", version=__version__, lifespan=lifespan)

app.include_router(media_router)
app.include_router(config_router)
