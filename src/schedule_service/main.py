# main.py
from dotenv import load_dotenv
load_dotenv()
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from core.config import get_settings
from core.database import init_db
from api.schedule_event_api import schedule_event_router
from api.health_api import health_api_router

settings = get_settings()

# Configure logging
LOG_LEVEL_NAME = settings.log_level.upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("MAIN")
logger.setLevel(LOG_LEVEL)

app = FastAPI(
    title=settings.app_name,
    description="CRUD API for schedule events with date, weekday and recurring lookups.",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    logger.info("app_startup: env=%s log_level=%s", settings.environment, LOG_LEVEL_NAME)
    init_db()


app.include_router(schedule_event_router, prefix=settings.api_prefix)
app.include_router(health_api_router, prefix=settings.api_prefix)


@app.get("/")
def root():
    return {"message": f"Welcome to the {settings.app_name}"}


def run():
    """Serve the app with uvicorn using the configured host and port."""
    if settings.environment.lower() == "production":
        # Production: Multiple workers, no reload
        uvicorn.run("main:app", host=settings.host, port=settings.port, workers=4)
    else:
        # Development: Single worker with hot reload
        # Note: reload=True is incompatible with workers > 1
        uvicorn.run("main:app", host=settings.host, port=settings.port, reload=True)


if __name__ == "__main__":
    run()
