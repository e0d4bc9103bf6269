from .models import (
    DESSERT_LABEL,
    MAIN_COURSE_LABEL,
    Recipe,
    Variant,
    classify,
    create_recipe,
    split_ingredients,
)

__all__ = [
    "DESSERT_LABEL",
    "MAIN_COURSE_LABEL",
    "Recipe",
    "Variant",
    "classify",
    "create_recipe",
    "split_ingredients",
]
