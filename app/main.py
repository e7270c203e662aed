import logging

from fastapi import FastAPI

from app.config import settings
from app.tracker.router import router as tracker_router


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


configure_logging()

app = FastAPI(title="SwaSthit 50@50", version="0.1.0")
app.include_router(tracker_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "tracker": {
            "goals": "/tracker/goals?category={all|physical|mental|other}",
            "stats": "/tracker/stats",
            "chart": "/tracker/chart",
            "milestones": "/tracker/milestones",
            "time_progress": "/tracker/time-progress",
            "dashboard": "/tracker/dashboard",
            "sync_text": "/tracker/sync/text",
            "sync_sheet": "/tracker/sync/sheet",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
