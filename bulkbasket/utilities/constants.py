from typing import Final

# Descriptor words removed from ingredient names before matching.
DESCRIPTOR_WORDS: Final[tuple[str, ...]] = (
    "fresh", "dried", "organic", "chopped", "sliced", "diced",
)

# Words dropped right after a leading quantity ("2 cups ...", "3 large ...").
MEASURE_WORDS: Final[tuple[str, ...]] = (
    "cup", "cups", "c",
    "tablespoon", "tablespoons", "tbsp", "tbs", "tbsp.",
    "teaspoon", "teaspoons", "tsp", "tsp.",
    "pound", "pounds", "lb", "lbs", "lb.", "lbs.",
    "ounce", "ounces", "oz", "oz.",
    "gram", "grams", "g", "kilogram", "kilograms", "kg",
    "milliliter", "milliliters", "ml", "liter", "liters", "l",
    "clove", "cloves", "can", "cans", "jar", "jars", "package", "packages",
    "pinch", "pinches", "dash", "dashes", "handful", "handfuls",
    "slice", "slices", "piece", "pieces", "bunch", "bunches", "head", "heads",
    "stalk", "stalks", "sprig", "sprigs",
    "large", "medium", "small", "whole",
)

UNICODE_FRACTIONS: Final[str] = "½⅓⅔¼¾⅕⅖⅗⅘⅙⅚⅛⅜⅝⅞"

# Unit prices (currency-agnostic). Order matters: the fuzzy lookup keeps the
# FIRST entry that reaches the best score, so ties resolve to earlier keys.
PRICE_TABLE: Final[dict[str, float]] = {
    # Proteins
    "chicken": 3.50, "beef": 5.00, "salmon": 6.00, "turkey": 4.00, "eggs": 0.25,
    "pork": 4.50, "fish": 5.50, "shrimp": 7.00, "tuna": 3.00, "bacon": 5.50,
    "ground beef": 5.00, "chicken breast": 4.00, "chicken thigh": 3.00,
    # Vegetables
    "spinach": 2.50, "broccoli": 2.00, "bell pepper": 1.50, "onion": 1.00, "tomato": 2.00,
    "carrot": 1.00, "garlic": 0.50, "lettuce": 2.00, "cucumber": 1.50,
    "potato": 1.20, "sweet potato": 1.80, "zucchini": 1.50, "mushroom": 2.50,
    "celery": 1.50, "cabbage": 1.00, "corn": 1.30, "peas": 2.00,
    # Pantry items
    "olive oil": 0.30, "soy sauce": 0.20, "salt": 0.05, "pepper": 0.10,
    "rice": 1.00, "pasta": 1.50, "bread": 2.50, "flour": 1.20,
    "sugar": 0.80, "vinegar": 0.15, "honey": 0.40, "oil": 0.25,
    # Dairy
    "cheese": 3.00, "milk": 1.00, "butter": 0.50, "yogurt": 1.50,
    "cream": 2.00, "sour cream": 1.80, "mozzarella": 3.50, "parmesan": 4.00,
    # Herbs/Spices
    "basil": 1.00, "oregano": 0.50, "thyme": 0.50, "ginger": 1.50,
    "cilantro": 1.00, "parsley": 1.00, "rosemary": 0.80, "paprika": 0.60,
    # Grains & Legumes
    "quinoa": 2.50, "beans": 1.50, "lentils": 1.80, "chickpeas": 1.60,
    "oats": 1.20, "barley": 1.40, "couscous": 1.80,
}
DEFAULT_UNIT_PRICE: Final[float] = 2.00

EXACT_MATCH_SCORE: Final[float] = 1.0
CONTAINMENT_SCORE: Final[float] = 0.8
MIN_MATCH_SCORE: Final[float] = 0.5
MAX_WORD_EDIT_DISTANCE: Final[int] = 2

# (minimum usage count, cost multiplier), checked top to bottom.
BULK_DISCOUNT_TIERS: Final[tuple[tuple[int, float], ...]] = (
    (7, 0.55),
    (5, 0.65),
    (3, 0.75),
    (2, 0.85),
)
NO_DISCOUNT_MULTIPLIER: Final[float] = 1.0

SAVINGS_DISPLAY_THRESHOLD: Final[float] = 0.50
HIGH_VALUE_THRESHOLD: Final[float] = 1.00

# Ingredient type classifier, first pattern that matches wins.
INGREDIENT_TYPE_PATTERNS: Final[tuple[tuple[str, str], ...]] = (
    ("protein", r"chicken|beef|pork|fish|salmon|turkey|bacon|ground|meat"),
    ("produce", r"tomato|onion|carrot|potato|pepper|spinach|broccoli|lettuce|cucumber"),
    ("dairy", r"milk|cheese|butter|yogurt|cream|dairy"),
    ("pantry", r"rice|pasta|flour|oil|sauce|salt|pepper|sugar|honey|vinegar"),
)
DEFAULT_INGREDIENT_TYPE: Final[str] = "other"

# Store department bucket for each ingredient type.
DEPARTMENT_BY_TYPE: Final[dict[str, str]] = {
    "produce": "produce",
    "protein": "meat",
    "dairy": "dairy",
    "pantry": "pantry",
    "other": "other",
}
DEPARTMENTS: Final[tuple[str, ...]] = ("produce", "meat", "dairy", "pantry", "other")

BULK_RECOMMENDATIONS: Final[dict[str, str]] = {
    "protein": "Buy family pack - freeze portions",
    "produce": "Buy bulk - prep and store properly",
    "pantry": "Buy largest size available",
    "dairy": "Buy larger container if within expiry",
    "other": "Consider bulk purchase",
}
