from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError
from .labels import DEFAULT_SEPARATOR
from .logger import DEFAULT_LEVEL, normalize_level


@dataclass(frozen=True)
class LogConfig:
    level: str = DEFAULT_LEVEL
    file: Optional[str] = None


@dataclass(frozen=True)
class EffectiveConfig:
    project_dir: str
    default_project: Optional[str]
    seed_file: Optional[str]
    sample_data: bool
    separator: str
    log: LogConfig


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/recipebox"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "recipebox.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    project_dir = cli_args.get("project") or global_cfg.get("default_project") or os.getcwd()
    project_cfg = load_project_config(project_dir)

    merged = merge_config(_cli_to_dict(cli_args), project_cfg, global_cfg)

    log_cfg = merged.get("log", {})
    if not isinstance(log_cfg, dict):
        raise ConfigError("[log] must be a table")

    return EffectiveConfig(
        project_dir=str(project_dir),
        default_project=merged.get("default_project"),
        seed_file=_resolve_seed_file(merged.get("seed_file"), project_dir),
        sample_data=bool(merged.get("sample_data", True)),
        separator=str(merged.get("separator", DEFAULT_SEPARATOR)),
        log=LogConfig(
            level=normalize_level(log_cfg.get("level", DEFAULT_LEVEL)),
            file=_optional_str(log_cfg.get("file")),
        ),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("seed_file", "separator"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    if cli_args.get("no_sample_data"):
        out["sample_data"] = False

    log: dict[str, Any] = {}
    if cli_args.get("log_level") is not None:
        log["level"] = cli_args["log_level"]
    if cli_args.get("verbose"):
        log["level"] = "DEBUG"
    if cli_args.get("log_file") is not None:
        log["file"] = cli_args["log_file"]
    if log:
        out["log"] = log

    return out


def _resolve_seed_file(value: Any, project_dir: str) -> Optional[str]:
    if not value:
        return None
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = Path(project_dir) / path
    return str(path)


def _optional_str(value: Any) -> Optional[str]:
    if value in (None, ""):
        return None
    return str(value)


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [f"project_dir = {cfg.project_dir!r}"]
    if cfg.default_project:
        lines.append(f"default_project = {cfg.default_project!r}")
    if cfg.seed_file:
        lines.append(f"seed_file = {cfg.seed_file!r}")
    lines.append(f"sample_data = {str(cfg.sample_data).lower()}")
    lines.append(f"separator = {cfg.separator!r}")
    lines.append("")
    lines.append("[log]")
    lines.append(f"level = {cfg.log.level!r}")
    if cfg.log.file:
        lines.append(f"file = {cfg.log.file!r}")
    return "\n".join(lines) + "\n"
