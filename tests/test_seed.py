from __future__ import annotations

from pathlib import Path

import pytest

from recipebox.catalog import Catalog
from recipebox.domain import Variant
from recipebox.errors import MissingFileError, SeedError
from recipebox.seed import SAMPLE_RECIPES, load_seed_file, seed_catalog


def test_sample_recipes() -> None:
    pasta, mocha = SAMPLE_RECIPES
    assert pasta.name == "Creamy salmon pasta"
    assert pasta.variant is Variant.MAIN_COURSE
    assert pasta.ingredients == ("Salmon", "Pasta", "Cream", "Garlic", "Salt")
    assert pasta.dietary_info == "gluten-free"
    assert mocha.name == "Mocha squares"
    assert mocha.variant is Variant.DESSERT
    assert mocha.ingredients == ("Eggs", "Sugar", "Coffee", "Cocoa powder", "Wheat flour")
    assert mocha.dietary_info == "no dietary restrictions"


def test_seed_catalog_samples_only() -> None:
    book = Catalog()
    assert seed_catalog(book) == 2
    assert book.list_all() == [(1, "Creamy salmon pasta"), (2, "Mocha squares")]


def test_seed_catalog_without_samples() -> None:
    book = Catalog()
    assert seed_catalog(book, sample_data=False) == 0
    assert len(book) == 0


def test_seed_catalog_with_file(tmp_path: Path) -> None:
    seed = tmp_path / "recipes.yaml"
    seed.write_text(
        """
recipes:
  - name: Pea soup
    category: soup
    ingredients: [Peas, Water]
    instructions: Boil peas. Blend.
    dietary: vegan
  - name: Apple pie
    category: Dessert
    ingredients: "Apples, Flour , Butter"
    instructions: Bake.
""",
        encoding="utf-8",
    )
    book = Catalog()
    assert seed_catalog(book, seed_file=str(seed)) == 4
    soup = book.get_by_index(3)
    pie = book.get_by_index(4)
    assert soup.variant is Variant.GENERIC
    assert soup.dietary_info == "vegan"
    assert pie.variant is Variant.DESSERT
    assert pie.ingredients == ("Apples", "Flour", "Butter")
    assert pie.dietary_info == ""


def test_load_seed_file_bare_list(tmp_path: Path) -> None:
    seed = tmp_path / "recipes.yaml"
    seed.write_text(
        "- name: Toast\n  ingredients: 3\n  dietary_info: vegetarian\n",
        encoding="utf-8",
    )
    (toast,) = load_seed_file(seed)
    assert toast.name == "Toast"
    assert toast.category == ""
    assert toast.ingredients == ()
    assert toast.dietary_info == "vegetarian"


def test_load_seed_file_missing(tmp_path: Path) -> None:
    with pytest.raises(MissingFileError):
        load_seed_file(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "content",
    (
        "recipes: [bad\n",
        "just text\n",
        "recipes: {name: x}\n",
        "- plain string\n",
        "- category: soup\n",
    ),
)
def test_load_seed_file_invalid(tmp_path: Path, content: str) -> None:
    seed = tmp_path / "recipes.yaml"
    seed.write_text(content, encoding="utf-8")
    with pytest.raises(SeedError):
        load_seed_file(seed)


def test_load_seed_file_not_utf8(tmp_path: Path) -> None:
    seed = tmp_path / "recipes.yaml"
    seed.write_bytes(b"- name: \xff\xfe\n")
    with pytest.raises(SeedError):
        load_seed_file(seed)
