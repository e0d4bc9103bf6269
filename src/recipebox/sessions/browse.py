from __future__ import annotations

from enum import Enum
import re
from typing import Optional

from .. import labels
from ..catalog import Catalog
from ..domain import Recipe
from ..logger import get_logger
from ..terminal import LineIO
from .common import write_block, write_lines, write_listing

log = get_logger("browse")

NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class BrowseState(Enum):
    SHOW_LIST = "show_list"
    DETAIL_SHOWN = "detail_shown"
    TERMINATED = "terminated"


class BrowseSession:
    """Read-only catalog navigation for the home cook role."""

    def __init__(self, catalog: Catalog, io: LineIO) -> None:
        self.catalog = catalog
        self.io = io
        self.state = BrowseState.SHOW_LIST
        self.selected: Optional[Recipe] = None

    def run(self) -> None:
        log.info("Browse session started")
        self.state = BrowseState.SHOW_LIST
        while self.state is not BrowseState.TERMINATED:
            if self.state is BrowseState.SHOW_LIST:
                self.state = self.show_list()
            else:
                self.state = self.show_detail()
        self.io.write(labels.RETURNING)
        log.info("Browse session finished")

    def show_list(self) -> BrowseState:
        self.io.write()
        self.io.write(labels.AVAILABLE_RECIPES)
        write_listing(self.io, self.catalog)
        write_lines(self.io, labels.BROWSE_HINTS)
        answer = self.io.read(labels.PROMPT_RECIPE_NUMBER)
        text = answer.strip()
        if not NUMBER_RE.fullmatch(text):
            log.debug(f"Non-numeric selection {answer!r}")
            self.io.write(labels.INVALID_INPUT)
            return BrowseState.SHOW_LIST
        number = int(text)
        if number == 0:
            return BrowseState.TERMINATED
        recipe = self.catalog.get_by_index(number)
        if recipe is None:
            log.debug(f"Selection {number} outside 1..{len(self.catalog)}")
            self.io.write(labels.INVALID_RECIPE_NUMBER)
            return BrowseState.SHOW_LIST
        self.selected = recipe
        return BrowseState.DETAIL_SHOWN

    def show_detail(self) -> BrowseState:
        recipe = self.selected
        if recipe is None:
            return BrowseState.SHOW_LIST
        write_detail(self.io, recipe)
        self.io.write()
        answer = self.io.read(labels.PROMPT_ANOTHER).strip().casefold()
        if answer == labels.NEGATIVE_ANSWER:
            return BrowseState.TERMINATED
        return BrowseState.SHOW_LIST


def write_detail(io: LineIO, recipe: Recipe) -> None:
    io.write()
    io.write(labels.SELECTED_RECIPE)
    write_block(io, recipe.render_summary())
    io.write()
    io.write(labels.INGREDIENTS_FOR.format(name=recipe.name))
    write_block(io, recipe.render_ingredient_list())
    io.write()
    io.write(labels.STEPS_FOR.format(name=recipe.name))
    write_block(io, recipe.render_step_instructions())
