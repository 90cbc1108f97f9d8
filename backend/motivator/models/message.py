from pydantic import BaseModel, Field


class ProgressRequest(BaseModel):
    """Today's completion counts, computed by the caller from its own storage."""

    completed: float = Field(ge=0)
    total: float = Field(ge=0)


class StreakRequest(BaseModel):
    """Consecutive days the habit (or all habits) has been completed."""

    streak: int = Field(ge=0)


class MessageOut(BaseModel):
    """A single catalog line and its stable id."""

    template_id: str
    text: str


class ProgressMessageOut(MessageOut):
    """Progress line. category is None for the onboarding line (no habits yet)."""

    category: str | None = None


class StreakMessageOut(MessageOut):
    """Streak line with the tier it was drawn from."""

    tier: str
