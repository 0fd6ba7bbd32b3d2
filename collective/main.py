import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collective.config import setup_logging
from collective.dependencies import build_storage
from collective.routers import events, images, partners, resources, schedule, themes
from collective.services.entity_store import EntityStore
from collective.services.view_state import ViewStateRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if not hasattr(app.state, "store"):
        app.state.store = EntityStore(build_storage())
    if not hasattr(app.state, "views"):
        app.state.views = ViewStateRegistry()
    logger.info("Collective API started")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Green Forest Collective API",
        version="1.0.0",
        description="Events, resource availability and partners of a photography collective",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Configure CORS for docs UI
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, specify exact origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(events.router)
    app.include_router(schedule.router)
    app.include_router(resources.router)
    app.include_router(themes.router)
    app.include_router(partners.router)
    app.include_router(images.router)

    @app.get("/")
    def read_root():
        return {"message": "Green Forest Collective API", "status": "running"}

    return app


app = create_app()
