import logging
import math
import random
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..core.clock import day_seed
from ..core.clock import today as _today
from ..core.constants import (
    ONBOARDING_MESSAGE,
    ProgressCategory,
    StreakTier,
    progress_category,
    streak_tier,
)
from ..core.personality import DEFAULT_PERSONALITY, Personality

logger = logging.getLogger(__name__)


# Progress buckets: short, punchy, action-oriented.
PROGRESS_MESSAGES: Mapping[ProgressCategory, Tuple[str, ...]] = MappingProxyType({
    ProgressCategory.ZERO: (
        "The day isn't over. Start now.",
        "One rep. That's all it takes to start.",
        "Winners show up. Period.",
        "Your future self is watching.",
        "Discipline beats motivation. Move.",
    ),
    ProgressCategory.PARTIAL: (
        "Momentum is building. Keep going.",
        "You started. That's more than most.",
        "Progress over perfection.",
        "The hard part is done. Finish it.",
        "Good. Now don't stop.",
    ),
    ProgressCategory.ALMOST_DONE: (
        "One more. You've got this.",
        "So close. Don't quit now.",
        "Finish what you started.",
        "The last rep is where growth happens.",
        "Champions finish strong.",
    ),
    ProgressCategory.COMPLETE: (
        "All habits done. That's the standard.",
        "100%. This is who you are now.",
        "Dominance. Pure dominance.",
        "Another day conquered.",
        "You showed up. You delivered.",
    ),
})

# Shown right after a single habit is checked off. Picked at random.
CELEBRATION_MESSAGES: Tuple[str, ...] = (
    "Done.",
    "Locked in.",
    "That's the one.",
    "Rep counted.",
    "Stacking wins.",
    "On the board.",
    "Another one.",
)

# {streak} is filled with the day count.
STREAK_MESSAGES: Mapping[StreakTier, str] = MappingProxyType({
    StreakTier.NONE: "Start your streak today.",
    StreakTier.FIRST_DAY: "Day 1. The beginning of something great.",
    StreakTier.BUILDING: "{streak} days. Building momentum.",
    StreakTier.HABIT: "{streak} days. This is becoming a habit.",
    StreakTier.UNSTOPPABLE: "{streak} days. You're unstoppable.",
    StreakTier.LEGENDARY: "{streak} days. Legendary.",
})


def _check_catalogs() -> None:
    """Every bucket must have at least one line; selection takes a modulo of its length."""
    for category in ProgressCategory:
        if not PROGRESS_MESSAGES.get(category):
            raise ValueError(f"Empty progress bucket: {category.value!r}")
    if not CELEBRATION_MESSAGES:
        raise ValueError("Empty celebration set")
    for tier in StreakTier:
        if not STREAK_MESSAGES.get(tier):
            raise ValueError(f"Missing streak message for tier: {tier.value!r}")


_check_catalogs()


@dataclass
class BuiltMessage:
    template_id: str
    text: str


@dataclass
class ProgressMessage(BuiltMessage):
    # None when the user has no habits yet.
    category: Optional[ProgressCategory] = None


@dataclass
class StreakMessage(BuiltMessage):
    tier: StreakTier = StreakTier.NONE


def _pick_daily_index(day: date, size: int) -> int:
    """Same index all day for a given bucket size; moves when the date changes."""
    return day_seed(day) % size


def build_progress_message(
    completed: float,
    total: float,
    today: Optional[date] = None,
    personality: Personality = DEFAULT_PERSONALITY,
) -> ProgressMessage:
    """
    Build the progress line for today.

    Negative inputs are clamped to 0, so a negative total reads as
    "no habits yet". The line is stable for the whole calendar day.
    """
    completed = max(completed, 0)
    total = max(total, 0)
    if total == 0:
        return ProgressMessage(
            template_id=f"{personality.id}:progress:onboarding",
            text=ONBOARDING_MESSAGE,
        )

    percentage = completed / total * 100
    category = progress_category(percentage)
    bucket = PROGRESS_MESSAGES[category]

    day = today if today is not None else _today()
    idx = _pick_daily_index(day, len(bucket))
    logger.debug("progress %.1f%% -> %s[%d] for %s", percentage, category.value, idx, day)

    return ProgressMessage(
        template_id=f"{personality.id}:progress:{category.value}:{idx}",
        text=bucket[idx],
        category=category,
    )


def build_celebration_message(
    rng: Optional[random.Random] = None,
    personality: Personality = DEFAULT_PERSONALITY,
) -> BuiltMessage:
    """Pick a celebration line. rng makes the pick reproducible; defaults to module random."""
    randrange = rng.randrange if rng is not None else random.randrange
    idx = randrange(len(CELEBRATION_MESSAGES))
    return BuiltMessage(
        template_id=f"{personality.id}:celebration:{idx}",
        text=CELEBRATION_MESSAGES[idx],
    )


def build_streak_message(
    streak: int,
    personality: Personality = DEFAULT_PERSONALITY,
) -> StreakMessage:
    """
    Streak line by tier. Negative streaks and NaN read as no streak,
    fractions are truncated, +inf lands in the top tier.
    """
    if isinstance(streak, float) and not math.isfinite(streak):
        streak = math.inf if streak > 0 else 0
    else:
        streak = max(int(streak), 0)
    tier = streak_tier(streak)
    return StreakMessage(
        template_id=f"{personality.id}:streak:{tier.value}",
        text=STREAK_MESSAGES[tier].format(streak=streak),
        tier=tier,
    )


def get_progress_message(completed: float, total: float, today: Optional[date] = None) -> str:
    """Motivational line for today's completion ratio."""
    return build_progress_message(completed, total, today=today).text


# Name the UI layer calls.
get_motivational_message = get_progress_message


def get_celebration_message(rng: Optional[random.Random] = None) -> str:
    return build_celebration_message(rng=rng).text


def get_streak_message(streak: int) -> str:
    return build_streak_message(streak).text
