import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.clock import today
from .core.config import get_settings
from .models.message import (
    MessageOut,
    ProgressMessageOut,
    ProgressRequest,
    StreakMessageOut,
    StreakRequest,
)
from .services.message_builder import (
    build_celebration_message,
    build_progress_message,
    build_streak_message,
)

settings = get_settings()
logging.basicConfig(level=settings.log_level, format="%(asctime)s | %(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Motivator Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/messages/progress", response_model=ProgressMessageOut)
async def progress_message(payload: ProgressRequest) -> ProgressMessageOut:
    """
    Motivational line for today's progress.

    Same counts ratio on the same calendar day always returns the same line.
    """
    message = build_progress_message(payload.completed, payload.total, today=today())
    logger.info("progress %s/%s -> %s", payload.completed, payload.total, message.template_id)
    return ProgressMessageOut(
        template_id=message.template_id,
        text=message.text,
        category=message.category.value if message.category else None,
    )


@app.get("/messages/celebration", response_model=MessageOut)
async def celebration_message() -> MessageOut:
    """Random short line to show when a habit is checked off."""
    message = build_celebration_message()
    return MessageOut(template_id=message.template_id, text=message.text)


@app.post("/messages/streak", response_model=StreakMessageOut)
async def streak_message(payload: StreakRequest) -> StreakMessageOut:
    """Streak line for the given number of consecutive days."""
    message = build_streak_message(payload.streak)
    logger.info("streak %d -> %s", payload.streak, message.template_id)
    return StreakMessageOut(
        template_id=message.template_id,
        text=message.text,
        tier=message.tier.value,
    )
