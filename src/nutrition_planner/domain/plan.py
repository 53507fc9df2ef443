"""Domain models for computed nutrition plans."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroSplit:
    """Fractions of daily calories assigned to each macronutrient."""

    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class MacroAmount:
    """Rounded grams and calories for one macronutrient."""

    grams: int
    calories: int


@dataclass(frozen=True)
class MacroBreakdown:
    """Daily macronutrient targets."""

    protein: MacroAmount
    carbs: MacroAmount
    fats: MacroAmount


@dataclass(frozen=True)
class MealTarget:
    """Calorie and macro targets for a single meal."""

    name: str
    calories: int
    protein_g: int
    carbs_g: int
    fats_g: int
    suggestion: str


@dataclass(frozen=True)
class FoodItem:
    """Reference nutrition facts for one serving of a food."""

    name: str
    serving: str
    macro: str
    macro_g: float
    calories: float

    @property
    def amount(self) -> str:
        """Return the serving summary, e.g. ``100g = 31g protein, 165 kcal``."""
        return (
            f"{self.serving} = {self.macro_g:g}g {self.macro}, "
            f"{self.calories:g} kcal"
        )


@dataclass(frozen=True)
class FoodCategory:
    """Named group of reference foods."""

    name: str
    items: tuple[FoodItem, ...]


@dataclass(frozen=True)
class NutritionPlan:
    """Full result of a plan calculation."""

    current_bmi: float
    goal_bmi: float
    basal_metabolic_rate: float
    total_daily_energy_expenditure: float
    target_calories: float
    weekly_weight_change_kg: float
    weight_difference_kg: float
    macros: MacroBreakdown
    meal_plan: tuple[MealTarget, ...]
    food_catalog: tuple[FoodCategory, ...]
