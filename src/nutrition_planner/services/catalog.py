"""Static food reference table."""

from nutrition_planner.domain.plan import FoodCategory, FoodItem

_FOOD_CATALOG: tuple[FoodCategory, ...] = (
    FoodCategory(
        name="Protein Sources",
        items=(
            FoodItem("Chicken Breast (cooked)", "100g", "protein", 31, 165),
            FoodItem("Salmon (cooked)", "100g", "protein", 25, 208),
            FoodItem("Greek Yogurt (plain)", "100g", "protein", 10, 59),
            FoodItem("Eggs (large)", "1 egg", "protein", 6, 70),
            FoodItem("Tofu (firm)", "100g", "protein", 15, 144),
            FoodItem("Lentils (cooked)", "100g", "protein", 9, 116),
            FoodItem("Lean Beef (cooked)", "100g", "protein", 26, 250),
        ),
    ),
    FoodCategory(
        name="Carbohydrate Sources",
        items=(
            FoodItem("Brown Rice (cooked)", "100g", "carbs", 23, 111),
            FoodItem("Quinoa (cooked)", "100g", "carbs", 22, 120),
            FoodItem("Sweet Potato (baked)", "100g", "carbs", 20, 86),
            FoodItem("Oats (dry)", "50g", "carbs", 32, 190),
            FoodItem("Whole Wheat Bread", "1 slice", "carbs", 12, 69),
            FoodItem("Banana (medium)", "1 banana", "carbs", 27, 105),
            FoodItem("Apple (medium)", "1 apple", "carbs", 25, 95),
        ),
    ),
    FoodCategory(
        name="Healthy Fats",
        items=(
            FoodItem("Avocado", "100g", "fat", 15, 160),
            FoodItem("Almonds", "30g", "fat", 15, 174),
            FoodItem("Olive Oil", "1 tbsp", "fat", 14, 119),
            FoodItem("Walnuts", "30g", "fat", 20, 196),
            FoodItem("Chia Seeds", "1 tbsp", "fat", 3, 58),
            FoodItem("Peanut Butter", "2 tbsp", "fat", 16, 188),
            FoodItem("Coconut Oil", "1 tbsp", "fat", 14, 117),
        ),
    ),
    FoodCategory(
        name="Vegetables (Low Calorie)",
        items=(
            FoodItem("Broccoli (cooked)", "100g", "carbs", 5, 34),
            FoodItem("Spinach (raw)", "100g", "carbs", 4, 23),
            FoodItem("Bell Peppers", "100g", "carbs", 6, 31),
            FoodItem("Cucumber", "100g", "carbs", 4, 16),
            FoodItem("Tomatoes", "100g", "carbs", 4, 18),
            FoodItem("Cauliflower", "100g", "carbs", 5, 25),
            FoodItem("Zucchini", "100g", "carbs", 3, 17),
        ),
    ),
)


def food_catalog() -> tuple[FoodCategory, ...]:
    """Return the food reference table grouped by macro category."""
    return _FOOD_CATALOG
