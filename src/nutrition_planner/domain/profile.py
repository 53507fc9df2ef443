"""Domain models for the person a plan is computed for."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Sex used to select the BMR formula."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def _missing_(cls, value: object) -> "Sex":
        # Anything that is not "male" uses the female formula.
        return cls.FEMALE


class Goal(str, Enum):
    """Weight goal driving the calorie offset and macro split."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    @classmethod
    def _missing_(cls, value: object) -> "Goal":
        # Unrecognized goals are planned as maintenance.
        return cls.MAINTAIN


class ActivityLevel(Enum):
    """Preset activity multipliers offered to users."""

    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    ACTIVE = 1.725
    VERY_ACTIVE = 1.9


@dataclass(frozen=True)
class Profile:
    """Biometric profile and goal for one calculation request."""

    age: int
    sex: Sex
    current_weight_kg: float
    current_height_cm: float
    goal_weight_kg: float
    activity_multiplier: float
    goal: Goal
