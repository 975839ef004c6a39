from fastapi import FastAPI
from datetime import datetime, timezone
import logging
import os

from winewithpete.events.web_observers import start as start_event_observers

# Routers
from winewithpete.api.routes import admin, essays, events, gatherings, metadata, newsletter, packages, subscription

# Logging
logger = logging.getLogger("winewithpete")

# Initialize FastAPI app
app = FastAPI(title="Wine With Pete API")

# Include routers
app.include_router(packages.router)
app.include_router(events.router)
app.include_router(newsletter.router)
app.include_router(gatherings.router)
app.include_router(essays.router)
app.include_router(metadata.router)
app.include_router(subscription.router)
app.include_router(admin.router)


@app.on_event("startup")
def _startup_event_observers():
    """Register event bus subscribers for the admin activity feed when the app starts."""
    start_event_observers()


@app.get("/healthz")
def healthz():
    return {
        "status": "ok",
        "app": "winewithpete",
        "commit": os.getenv("GIT_SHA", "dev"),
        "time": datetime.now(timezone.utc).isoformat(),
    }
