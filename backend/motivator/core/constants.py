"""
Constants for progress bucketing and streak tiers.
Progress: percentage of today's habits done -> zero / partial / almost_done / complete.
Streak: consecutive days -> one of six tiers, first match wins.
"""

from enum import Enum
from typing import Final


class ProgressCategory(str, Enum):
    ZERO = "zero"
    PARTIAL = "partial"
    ALMOST_DONE = "almostDone"
    COMPLETE = "complete"


class StreakTier(str, Enum):
    NONE = "none"
    FIRST_DAY = "first_day"
    BUILDING = "building"
    HABIT = "habit"
    UNSTOPPABLE = "unstoppable"
    LEGENDARY = "legendary"


# Shown when the user has no habits yet; total == 0 never divides.
ONBOARDING_MESSAGE: Final[str] = "Create your first habit. Start building."

# Upper bounds (exclusive) for the percentage buckets. 0 is checked first.
PARTIAL_UPPER_PERCENT: Final[float] = 50.0
ALMOST_DONE_UPPER_PERCENT: Final[float] = 100.0

# Upper bounds (exclusive) for streak tiers after day 1.
BUILDING_UPPER_DAYS: Final[int] = 7
HABIT_UPPER_DAYS: Final[int] = 30
UNSTOPPABLE_UPPER_DAYS: Final[int] = 100


def progress_category(percentage: float) -> ProgressCategory:
    """Bucket a completion percentage. Over 100 (extra reps) is still COMPLETE."""
    if percentage == 0:
        return ProgressCategory.ZERO
    if percentage < PARTIAL_UPPER_PERCENT:
        return ProgressCategory.PARTIAL
    if percentage < ALMOST_DONE_UPPER_PERCENT:
        return ProgressCategory.ALMOST_DONE
    return ProgressCategory.COMPLETE


def streak_tier(streak: int) -> StreakTier:
    """Map a streak length to its tier."""
    if streak == 0:
        return StreakTier.NONE
    if streak == 1:
        return StreakTier.FIRST_DAY
    if streak < BUILDING_UPPER_DAYS:
        return StreakTier.BUILDING
    if streak < HABIT_UPPER_DAYS:
        return StreakTier.HABIT
    if streak < UNSTOPPABLE_UPPER_DAYS:
        return StreakTier.UNSTOPPABLE
    return StreakTier.LEGENDARY
