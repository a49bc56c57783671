"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from drinklog.config import settings
from drinklog.database import Base, engine
from drinklog.errors import register_error_handlers

# Import routers
from drinklog.routers import auth, catalog, events

# Import all models so Base.metadata knows about them
from drinklog.models.user import User    # noqa: F401
from drinklog.models.drink import Drink  # noqa: F401
from drinklog.models.event import Event  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Drink Log",
    description="Personal drinking diary: user-scoped events referencing drinks",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Signed cookie sessions
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
)

register_error_handlers(app)

# Register routers
app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(events.router, tags=["Events"])
if settings.ENABLE_CATALOG_ROUTES:
    app.include_router(catalog.router, tags=["Catalog"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
