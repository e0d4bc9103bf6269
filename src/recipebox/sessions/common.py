from __future__ import annotations

from typing import Iterable

from ..catalog import Catalog
from ..domain import Recipe
from ..labels import NOT_FOUND
from ..terminal import LineIO


def write_lines(io: LineIO, lines: Iterable[str]) -> None:
    for line in lines:
        io.write(line)


def write_block(io: LineIO, text: str) -> None:
    if text:
        write_lines(io, text.split("\n"))


def write_listing(io: LineIO, catalog: Catalog) -> None:
    for index, name in catalog.list_all():
        io.write(f"{index}. {name}")


def write_results(io: LineIO, recipes: list[Recipe], separator: str) -> None:
    if not recipes:
        io.write(NOT_FOUND)
        return
    for recipe in recipes:
        write_block(io, recipe.render_summary())
        io.write(separator)
