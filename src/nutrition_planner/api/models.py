"""Pydantic models for plan requests."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_planner.domain.profile import Goal, Profile, Sex


class ProfileRequest(BaseModel):
    """Profile payload submitted by the calculator form."""

    model_config = ConfigDict(allow_inf_nan=False)

    age: int = Field(gt=0)
    sex: str
    current_weight_kg: float = Field(gt=0)
    current_height_cm: float = Field(gt=0)
    goal_weight_kg: float = Field(gt=0)
    activity_multiplier: float = Field(gt=0)
    goal: str = Goal.MAINTAIN.value

    def to_profile(self) -> Profile:
        """Convert the payload into a domain profile."""
        return Profile(
            age=self.age,
            sex=Sex(self.sex),
            current_weight_kg=self.current_weight_kg,
            current_height_cm=self.current_height_cm,
            goal_weight_kg=self.goal_weight_kg,
            activity_multiplier=self.activity_multiplier,
            goal=Goal(self.goal),
        )
