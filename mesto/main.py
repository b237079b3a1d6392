"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mesto import database
from mesto.api import auth, cards, users
from mesto.api.middleware import log_requests
from mesto.config import get_settings
from mesto.errors import register_exception_handlers
from mesto.logging_config import configure_logging

settings = get_settings()

configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB client on startup and close it on shutdown."""
    client = await database.connect(settings)
    app.state.mongo_client = client
    app.state.db = client[settings.mongo_db_name]
    yield
    database.close(client)


app = FastAPI(
    title="Mesto API",
    description="Photo card sharing backend with cookie-based JWT authentication",
    version="0.1.0",
    lifespan=lifespan,
)

# Credentialed cross-origin requests need explicit origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(cards.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
