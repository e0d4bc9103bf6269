from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from .domain import Recipe
from .logger import get_logger

log = get_logger("catalog")


class Catalog:
    """Insertion-ordered recipe collection with stable 1-based indices."""

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._recipes: list[Recipe] = list(recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes))

    def add(self, recipe: Recipe) -> int:
        self._recipes.append(recipe)
        index = len(self._recipes)
        log.debug(f"Added recipe #{index}: {recipe.name!r} ({recipe.variant.value})")
        return index

    def list_all(self) -> list[tuple[int, str]]:
        return [(index, recipe.name) for index, recipe in enumerate(self._recipes, start=1)]

    def get_by_index(self, index: int) -> Optional[Recipe]:
        if index < 1 or index > len(self._recipes):
            return None
        return self._recipes[index - 1]

    def index_of(self, recipe: Recipe) -> int:
        for index, candidate in enumerate(self._recipes, start=1):
            if candidate is recipe:
                return index
        raise ValueError(f"{recipe.name!r} is not in the catalog")

    def search_by_ingredients(self, query: Iterable[str]) -> list[Recipe]:
        wanted = list(query)
        return self._filter("ingredients", wanted, lambda r: r.matches_ingredients(wanted))

    def search_by_category(self, query: str) -> list[Recipe]:
        return self._filter("category", query, lambda r: r.matches_category(query))

    def search_by_dietary_info(self, query: str) -> list[Recipe]:
        return self._filter("dietary_info", query, lambda r: r.matches_dietary_info(query))

    def _filter(self, field: str, query: object, predicate: Callable[[Recipe], bool]) -> list[Recipe]:
        found = [recipe for recipe in self._recipes if predicate(recipe)]
        log.debug(f"Search by {field} {query!r}: {len(found)} match(es)")
        return found
