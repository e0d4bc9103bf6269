from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Callable

from .app import run_app
from .catalog import Catalog
from .config import EffectiveConfig, config_to_toml, resolve_config
from .domain import Recipe, split_ingredients
from .errors import (
    ConfigError,
    InputClosedError,
    MissingFileError,
    RecipeboxError,
    RecipeNotFoundError,
    SeedError,
)
from .logger import configure_logging, get_logger
from .seed import seed_catalog
from .sessions import write_detail
from .terminal import Terminal

log = get_logger("cli")

STARTER_CONFIG = """# recipebox project configuration
sample_data = true
# seed_file = "recipes.yaml"
# separator = "-----------------------"

[log]
level = "WARNING"
# file = "recipebox.log"
"""


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "run": _cmd_run,
        "list": _cmd_list,
        "show": _cmd_show,
        "config": _cmd_config,
        "init": _cmd_init,
    }

    handler = handlers.get(args.command or "run")
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except InputClosedError:
        log.info("Input closed, leaving the program")
        return 0
    except RecipeboxError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _common_parser(argument_default: object = None) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False, argument_default=argument_default)
    common.add_argument("--project")
    common.add_argument("--seed-file", dest="seed_file")
    common.add_argument("--no-sample-data", dest="no_sample_data", action="store_true")
    common.add_argument("--separator")
    common.add_argument("--log-level", dest="log_level")
    common.add_argument("--log-file", dest="log_file")
    common.add_argument("--verbose", action="store_true")
    return common


def _build_parser() -> argparse.ArgumentParser:
    # Subcommand copies leave unset options alone so values given before
    # the subcommand are kept.
    common = _common_parser(argparse.SUPPRESS)

    parser = argparse.ArgumentParser(prog="recipebox", parents=[_common_parser()])
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("run", parents=[common])

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--category")
    listing.add_argument("--dietary")
    listing.add_argument("--ingredients")
    listing.add_argument("--json", action="store_true")

    show = sub.add_parser("show", parents=[common])
    show.add_argument("index", type=int)

    sub.add_parser("config", parents=[common])

    init = sub.add_parser("init")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    return parser


def _cmd_run(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = _load_catalog(cfg)
    return run_app(catalog, Terminal(), separator=cfg.separator)


def _cmd_list(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = _load_catalog(cfg)
    recipes = list(catalog)
    if args.category is not None:
        recipes = [r for r in recipes if r.matches_category(args.category)]
    if args.dietary is not None:
        recipes = [r for r in recipes if r.matches_dietary_info(args.dietary)]
    if args.ingredients is not None:
        wanted = split_ingredients(args.ingredients)
        recipes = [r for r in recipes if r.matches_ingredients(wanted)]

    if args.json:
        print(json.dumps([_recipe_json(catalog, r) for r in recipes], indent=2))
    else:
        for recipe in recipes:
            print(f"{catalog.index_of(recipe)}. {recipe.name}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = _load_catalog(cfg)
    recipe = catalog.get_by_index(args.index)
    if recipe is None:
        raise RecipeNotFoundError(f"No recipe number {args.index} (catalog has {len(catalog)})")
    write_detail(Terminal(), recipe)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    config_path = os.path.join(root, "recipebox.toml")
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write(STARTER_CONFIG)
    print(config_path)
    return 0


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(vars(args).copy())
    configure_logging(cfg.log.level, cfg.log.file)
    return cfg


def _load_catalog(cfg: EffectiveConfig) -> Catalog:
    catalog = Catalog()
    seed_catalog(catalog, sample_data=cfg.sample_data, seed_file=cfg.seed_file)
    return catalog


def _recipe_json(catalog: Catalog, recipe: Recipe) -> dict[str, object]:
    data = recipe.to_dict()
    return {"index": catalog.index_of(recipe), **data}


def _exit_code(exc: RecipeboxError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, (MissingFileError, RecipeNotFoundError)):
        return 3
    if isinstance(exc, SeedError):
        return 4
    return 1
