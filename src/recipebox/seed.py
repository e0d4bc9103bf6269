from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from .catalog import Catalog
from .domain import DESSERT_LABEL, MAIN_COURSE_LABEL, Recipe, create_recipe, split_ingredients
from .errors import MissingFileError, SeedError
from .logger import get_logger

log = get_logger("seed")


SAMPLE_RECIPES: tuple[Recipe, ...] = (
    create_recipe(
        "Creamy salmon pasta",
        MAIN_COURSE_LABEL,
        ["Salmon", "Pasta", "Cream", "Garlic", "Salt"],
        "Boil the pasta. Fry the salmon and garlic in a pan. Stir in the cream. Combine the pasta and the sauce.",
        "gluten-free",
    ),
    create_recipe(
        "Mocha squares",
        DESSERT_LABEL,
        ["Eggs", "Sugar", "Coffee", "Cocoa powder", "Wheat flour"],
        "Mix the ingredients and bake in the oven at 175 degrees for 20 minutes. Add the frosting.",
        "no dietary restrictions",
    ),
)


def seed_catalog(catalog: Catalog, sample_data: bool = True, seed_file: Optional[str] = None) -> int:
    recipes: list[Recipe] = []
    if sample_data:
        recipes.extend(SAMPLE_RECIPES)
    if seed_file:
        recipes.extend(load_seed_file(seed_file))
    for recipe in recipes:
        catalog.add(recipe)
    log.info(f"Seeded catalog with {len(recipes)} recipe(s)")
    return len(recipes)


def load_seed_file(path: str | Path) -> list[Recipe]:
    """Read recipes from a YAML document.

    The document is either a list of recipe mappings or a mapping with a
    ``recipes`` list. ``ingredients`` may be a list or a comma-separated
    string; ``dietary`` is accepted as an alias of ``dietary_info``.
    """
    seed_path = Path(path)
    try:
        text = seed_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Seed file not found: {seed_path}") from exc
    except UnicodeDecodeError as exc:
        raise SeedError(f"{seed_path}: not valid UTF-8") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SeedError(f"{seed_path}: invalid YAML") from exc

    if isinstance(data, dict):
        data = data.get("recipes")
    if not isinstance(data, list):
        raise SeedError(f"{seed_path}: expected a list of recipes")
    return [_parse_entry(entry, seed_path, number) for number, entry in enumerate(data, start=1)]


def _parse_entry(entry: Any, source: Path, number: int) -> Recipe:
    if not isinstance(entry, dict):
        raise SeedError(f"{source}: recipe #{number} must be a mapping")
    name = _text(entry.get("name"))
    if not name:
        raise SeedError(f"{source}: recipe #{number} is missing a name")
    dietary = entry.get("dietary_info", entry.get("dietary"))
    return create_recipe(
        name,
        _text(entry.get("category")),
        _ingredients(entry.get("ingredients")),
        _text(entry.get("instructions")),
        _text(dietary),
    )


def _ingredients(value: Any) -> list[str]:
    if isinstance(value, list):
        return [str(item).strip() for item in value]
    if isinstance(value, str):
        return split_ingredients(value)
    return []


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
