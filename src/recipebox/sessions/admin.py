from __future__ import annotations

from enum import Enum

from .. import labels
from ..catalog import Catalog
from ..domain import create_recipe, split_ingredients
from ..logger import get_logger
from ..terminal import LineIO
from .common import write_lines, write_listing, write_results

log = get_logger("admin")


class AdminState(Enum):
    MENU = "menu"
    LIST_ALL = "list_all"
    ADD_RECIPE = "add_recipe"
    SEARCH_BY_INGREDIENTS = "search_by_ingredients"
    SEARCH_BY_CATEGORY = "search_by_category"
    SEARCH_BY_DIETARY_INFO = "search_by_dietary_info"
    EXIT = "exit"


COMMANDS: dict[str, AdminState] = {
    "1": AdminState.LIST_ALL,
    "2": AdminState.ADD_RECIPE,
    "3": AdminState.SEARCH_BY_INGREDIENTS,
    "4": AdminState.SEARCH_BY_CATEGORY,
    "5": AdminState.SEARCH_BY_DIETARY_INFO,
    "6": AdminState.EXIT,
}


class AdminSession:
    """Menu loop that lets the administrator list, add and search recipes."""

    def __init__(self, catalog: Catalog, io: LineIO, separator: str = labels.DEFAULT_SEPARATOR) -> None:
        self.catalog = catalog
        self.io = io
        self.separator = separator
        self.state = AdminState.MENU
        self._actions = {
            AdminState.LIST_ALL: self._list_all,
            AdminState.ADD_RECIPE: self._add_recipe,
            AdminState.SEARCH_BY_INGREDIENTS: self._search_by_ingredients,
            AdminState.SEARCH_BY_CATEGORY: self._search_by_category,
            AdminState.SEARCH_BY_DIETARY_INFO: self._search_by_dietary_info,
        }

    def run(self) -> None:
        log.info("Admin session started")
        self.state = AdminState.MENU
        while self.state is not AdminState.EXIT:
            self.state = self.step()
        self.io.write(labels.RETURNING)
        log.info("Admin session finished")

    def step(self) -> AdminState:
        self.io.write()
        write_lines(self.io, labels.ADMIN_MENU)
        choice = self.io.read(labels.ENTER_CHOICE).strip()
        target = COMMANDS.get(choice)
        if target is None:
            log.debug(f"Unrecognized admin command {choice!r}")
            self.io.write(labels.INVALID_CHOICE)
            return AdminState.MENU
        if target is AdminState.EXIT:
            return AdminState.EXIT
        self._actions[target]()
        return AdminState.MENU

    def _list_all(self) -> None:
        self.io.write()
        write_listing(self.io, self.catalog)

    def _add_recipe(self) -> None:
        name = self.io.read(labels.PROMPT_NAME)
        category = self.io.read(labels.PROMPT_CATEGORY)
        ingredients = split_ingredients(self.io.read(labels.PROMPT_INGREDIENTS))
        instructions = self.io.read(labels.PROMPT_INSTRUCTIONS)
        dietary_info = self.io.read(labels.PROMPT_DIETARY_ADD)
        recipe = create_recipe(name, category, ingredients, instructions, dietary_info)
        self.catalog.add(recipe)
        self.io.write(labels.RECIPE_ADDED)

    def _search_by_ingredients(self) -> None:
        query = split_ingredients(self.io.read(labels.PROMPT_INGREDIENTS))
        write_results(self.io, self.catalog.search_by_ingredients(query), self.separator)

    def _search_by_category(self) -> None:
        query = self.io.read(labels.PROMPT_CATEGORY)
        write_results(self.io, self.catalog.search_by_category(query), self.separator)

    def _search_by_dietary_info(self) -> None:
        query = self.io.read(labels.PROMPT_DIETARY_SEARCH)
        write_results(self.io, self.catalog.search_by_dietary_info(query), self.separator)
