from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


MAIN_COURSE_LABEL = "main course"
DESSERT_LABEL = "dessert"


class Variant(Enum):
    MAIN_COURSE = "main_course"
    DESSERT = "dessert"
    GENERIC = "generic"


_CANONICAL_CATEGORIES = {
    MAIN_COURSE_LABEL: Variant.MAIN_COURSE,
    DESSERT_LABEL: Variant.DESSERT,
}

_HEADERS = {
    Variant.MAIN_COURSE: "### Main course ###",
    Variant.DESSERT: "### Dessert ###",
}


def _fold(text: str) -> str:
    return text.casefold()


def classify(category: str) -> Variant:
    return _CANONICAL_CATEGORIES.get(_fold(category or ""), Variant.GENERIC)


@dataclass(frozen=True)
class Recipe:
    name: str
    category: str
    ingredients: tuple[str, ...]
    instructions: str
    dietary_info: str
    variant: Variant = field(default=Variant.GENERIC)

    @classmethod
    def create(
        cls,
        name: str,
        category: str,
        ingredients: Iterable[str],
        instructions: str,
        dietary_info: str,
    ) -> Recipe:
        """Build a recipe, classifying it once from its category.

        Fixed categories are stored under their canonical label, anything
        else is kept verbatim and tagged ``Variant.GENERIC``.
        """
        variant = classify(category)
        if variant is Variant.MAIN_COURSE:
            category = MAIN_COURSE_LABEL
        elif variant is Variant.DESSERT:
            category = DESSERT_LABEL
        return cls(
            name=name,
            category=category,
            ingredients=tuple(ingredients),
            instructions=instructions,
            dietary_info=dietary_info,
            variant=variant,
        )

    def render_summary(self) -> str:
        lines: list[str] = []
        header = _HEADERS.get(self.variant)
        if header:
            lines.append(header)
        lines.append(f"Recipe: {self.name}")
        lines.append(f"Category: {self.category}")
        lines.append(f"Ingredients: {', '.join(self.ingredients)}")
        lines.append(f"Instructions: {self.instructions}")
        lines.append(f"Dietary info: {self.dietary_info}")
        return "\n".join(lines)

    def render_ingredient_list(self) -> str:
        return "\n".join(f"- {ingredient}" for ingredient in self.ingredients)

    def steps(self) -> list[str]:
        # Blank fragments (e.g. after a trailing period) are not steps.
        fragments = [part.strip() for part in self.instructions.split(".")]
        return [part for part in fragments if part]

    def render_step_instructions(self) -> str:
        return "\n".join(f"Step {number}: {step}" for number, step in enumerate(self.steps(), start=1))

    def matches_ingredients(self, query: Iterable[str]) -> bool:
        have = {_fold(ingredient) for ingredient in self.ingredients}
        return all(_fold(wanted) in have for wanted in query)

    def matches_category(self, query: str) -> bool:
        return _fold(self.category) == _fold(query)

    def matches_dietary_info(self, query: str) -> bool:
        return _fold(self.dietary_info) == _fold(query)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "category": self.category,
            "variant": self.variant.value,
            "ingredients": list(self.ingredients),
            "instructions": self.instructions,
            "dietary_info": self.dietary_info,
        }


def create_recipe(
    name: str,
    category: str,
    ingredients: Iterable[str],
    instructions: str,
    dietary_info: str,
) -> Recipe:
    return Recipe.create(name, category, ingredients, instructions, dietary_info)


def split_ingredients(text: str) -> list[str]:
    """Split a comma-separated line into trimmed elements, keeping empties."""
    return [part.strip() for part in text.split(",")]
