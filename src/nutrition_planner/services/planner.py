"""Energy and macronutrient planning."""

import logging
import math
import random
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from nutrition_planner.domain.plan import (
    MacroAmount,
    MacroBreakdown,
    MacroSplit,
    MealTarget,
    NutritionPlan,
)
from nutrition_planner.domain.profile import Goal, Profile, Sex
from nutrition_planner.services.catalog import food_catalog

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

DEFAULT_CALORIE_ADJUSTMENT_KCAL = 500
DEFAULT_WEEKLY_WEIGHT_CHANGE_KG = 0.5

MACRO_SPLITS: dict[Goal, MacroSplit] = {
    Goal.LOSE: MacroSplit(protein=0.35, carbs=0.35, fats=0.30),
    Goal.MAINTAIN: MacroSplit(protein=0.30, carbs=0.40, fats=0.30),
    Goal.GAIN: MacroSplit(protein=0.25, carbs=0.45, fats=0.30),
}

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealShare:
    """Fractions of the daily targets assigned to one meal."""

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    suggestions: tuple[str, ...]


MEAL_SHARES: tuple[MealShare, ...] = (
    MealShare(
        name="Breakfast",
        calories=0.25,
        protein=0.25,
        carbs=0.30,
        fats=0.25,
        suggestions=(
            "Oatmeal with berries and nuts",
            "Greek yogurt with granola",
            "Scrambled eggs with whole grain toast",
            "Protein smoothie with banana",
        ),
    ),
    MealShare(
        name="Lunch",
        calories=0.35,
        protein=0.35,
        carbs=0.35,
        fats=0.35,
        suggestions=(
            "Grilled chicken salad with quinoa",
            "Salmon with sweet potato and vegetables",
            "Turkey and avocado wrap",
            "Lentil soup with whole grain bread",
        ),
    ),
    MealShare(
        name="Dinner",
        calories=0.30,
        protein=0.30,
        carbs=0.25,
        fats=0.30,
        suggestions=(
            "Lean beef with brown rice and broccoli",
            "Baked fish with roasted vegetables",
            "Chicken stir-fry with mixed vegetables",
            "Tofu curry with cauliflower rice",
        ),
    ),
    MealShare(
        name="Snacks",
        calories=0.10,
        protein=0.10,
        carbs=0.10,
        fats=0.10,
        suggestions=(
            "Apple with almond butter",
            "Greek yogurt with berries",
            "Mixed nuts and seeds",
            "Protein bar",
        ),
    ),
)


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """Return body mass index rounded to one decimal."""
    height_m = height_cm / 100
    return _round_one_decimal(_divide(weight_kg, height_m * height_m))


def compute_bmr(profile: Profile) -> float:
    """Return basal metabolic rate (Mifflin-St Jeor) in kcal/day."""
    base = (
        10 * profile.current_weight_kg
        + 6.25 * profile.current_height_cm
        - 5 * profile.age
    )
    if Sex(profile.sex) is Sex.MALE:
        return base + 5
    return base - 161


def compute_target_calories(
    bmr: float,
    activity_multiplier: float,
    goal: Goal | str,
    *,
    calorie_adjustment_kcal: float = DEFAULT_CALORIE_ADJUSTMENT_KCAL,
    weekly_weight_change_kg: float = DEFAULT_WEEKLY_WEIGHT_CHANGE_KG,
) -> tuple[float, float]:
    """Return the daily calorie target and the expected weekly change in kg."""
    tdee = bmr * activity_multiplier
    resolved = Goal(goal)
    if resolved is Goal.LOSE:
        return tdee - calorie_adjustment_kcal, -weekly_weight_change_kg
    if resolved is Goal.GAIN:
        return tdee + calorie_adjustment_kcal, weekly_weight_change_kg
    return tdee, 0.0


def compute_macros(target_calories: float, goal: Goal | str) -> MacroBreakdown:
    """Split the calorie target into protein, carbs and fats.

    Grams and calories are rounded independently, so grams times energy
    density may differ slightly from the rounded calories.
    """
    split = MACRO_SPLITS[Goal(goal)]
    protein_kcal = target_calories * split.protein
    carbs_kcal = target_calories * split.carbs
    fats_kcal = target_calories * split.fats
    return MacroBreakdown(
        protein=MacroAmount(
            grams=_round_half_up(protein_kcal / PROTEIN_KCAL_PER_G),
            calories=_round_half_up(protein_kcal),
        ),
        carbs=MacroAmount(
            grams=_round_half_up(carbs_kcal / CARBS_KCAL_PER_G),
            calories=_round_half_up(carbs_kcal),
        ),
        fats=MacroAmount(
            grams=_round_half_up(fats_kcal / FAT_KCAL_PER_G),
            calories=_round_half_up(fats_kcal),
        ),
    )


def build_meal_plan(
    target_calories: float,
    macros: MacroBreakdown,
    rng: random.Random | None = None,
) -> tuple[MealTarget, ...]:
    """Distribute daily targets over breakfast, lunch, dinner and snacks."""
    chooser = rng or random.Random()
    return tuple(
        MealTarget(
            name=share.name,
            calories=_round_half_up(target_calories * share.calories),
            protein_g=_round_half_up(macros.protein.grams * share.protein),
            carbs_g=_round_half_up(macros.carbs.grams * share.carbs),
            fats_g=_round_half_up(macros.fats.grams * share.fats),
            suggestion=chooser.choice(share.suggestions),
        )
        for share in MEAL_SHARES
    )


@dataclass
class NutritionPlanner:
    """Builds complete nutrition plans from profiles."""

    rng: random.Random = field(default_factory=random.Random)
    calorie_adjustment_kcal: float = DEFAULT_CALORIE_ADJUSTMENT_KCAL
    weekly_weight_change_kg: float = DEFAULT_WEEKLY_WEIGHT_CHANGE_KG
    debug: bool = False

    def plan(self, profile: Profile) -> NutritionPlan:
        """Compute BMI, energy targets, macros and meals for a profile."""
        bmr = compute_bmr(profile)
        tdee = bmr * profile.activity_multiplier
        target_calories, weekly_change = compute_target_calories(
            bmr,
            profile.activity_multiplier,
            profile.goal,
            calorie_adjustment_kcal=self.calorie_adjustment_kcal,
            weekly_weight_change_kg=self.weekly_weight_change_kg,
        )
        macros = compute_macros(target_calories, profile.goal)
        plan = NutritionPlan(
            current_bmi=compute_bmi(
                profile.current_weight_kg, profile.current_height_cm
            ),
            goal_bmi=compute_bmi(profile.goal_weight_kg, profile.current_height_cm),
            basal_metabolic_rate=bmr,
            total_daily_energy_expenditure=tdee,
            target_calories=target_calories,
            weekly_weight_change_kg=weekly_change,
            weight_difference_kg=_round_one_decimal(
                profile.goal_weight_kg - profile.current_weight_kg
            ),
            macros=macros,
            meal_plan=build_meal_plan(target_calories, macros, self.rng),
            food_catalog=food_catalog(),
        )
        if self.debug:
            _logger.info(
                "Nutrition plan: goal=%s bmr=%.1f tdee=%.1f target=%.1f",
                Goal(profile.goal).value,
                bmr,
                tdee,
                target_calories,
            )
        return plan


def _round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up; NaN/inf pass through."""
    if not math.isfinite(value):
        return value  # type: ignore[return-value]
    return math.floor(value + 0.5)


def _round_one_decimal(value: float) -> float:
    """Round to one decimal with halves going away from zero; NaN/inf pass through."""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE results for a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
